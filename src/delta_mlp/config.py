"""Configuration dataclasses for the delta-rule trainer."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


@dataclass(slots=True)
class NetworkConfig:
    """Configuration controlling the unit chain and its update rule.

    Parameters
    ----------
    layer_sizes:
        Declared sizes of each layer, input first. The network holds
        ``len(layer_sizes) - 1`` units and unit ``i`` receives
        ``layer_sizes[i]`` weights. Only the first unit is ever fed more than
        one value; every later unit sees its predecessor's scalar output.
    learning_rate:
        Step size shared by every unit's additive update. It is fixed for the
        lifetime of the network.
    """

    layer_sizes: Sequence[int]
    learning_rate: float = 0.1

    def __post_init__(self) -> None:
        self.layer_sizes = tuple(self.layer_sizes)
        if len(self.layer_sizes) < 2:
            raise ValueError("layer_sizes must contain at least two entries")
        if any(isinstance(size, bool) or not isinstance(size, int) for size in self.layer_sizes):
            raise ValueError("layer_sizes entries must be integers")
        if any(size <= 0 for size in self.layer_sizes):
            raise ValueError("layer_sizes entries must be positive")
        if not math.isfinite(self.learning_rate):
            raise ValueError("learning_rate must be finite")


@dataclass(slots=True)
class TrainingConfig:
    """Options for :meth:`delta_mlp.network.Network.fit`."""

    epochs: int = 100
    show_progress: bool = False

    def __post_init__(self) -> None:
        if self.epochs <= 0:
            raise ValueError("epochs must be positive")


__all__ = ["NetworkConfig", "TrainingConfig"]
