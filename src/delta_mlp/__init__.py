"""Minimal delta-rule trainer for chains of single-output linear units.

The package provides:
- :class:`Unit`, a weighted sum with an additive update rule,
- :class:`Network`, an ordered chain of units with sign-thresholded training,
- configuration dataclasses, sample helpers and a loss plot.
"""

from .config import NetworkConfig, TrainingConfig
from .data import Sample, sign_and_dataset, validate_dataset
from .errors import EmptyInputError, InvalidInputError
from .network import Network, TrainingHistory
from .unit import Unit

__all__ = [
    "EmptyInputError",
    "InvalidInputError",
    "Network",
    "NetworkConfig",
    "Sample",
    "TrainingConfig",
    "TrainingHistory",
    "Unit",
    "sign_and_dataset",
    "validate_dataset",
]
