"""Labelled samples for sign classification."""
from __future__ import annotations

from typing import List, Sequence, Tuple

from .errors import EmptyInputError, InvalidInputError

Sample = Tuple[Sequence[float], float]


def sign_and_dataset() -> List[Tuple[List[float], float]]:
    """Return the four corners of the ``[-1, 1]`` square labelled as logical AND.

    Only ``[1, 1]`` is positive. Fresh lists are built on every call so
    callers may mutate them freely.
    """

    return [
        ([1.0, 1.0], 1.0),
        ([1.0, -1.0], -1.0),
        ([-1.0, 1.0], -1.0),
        ([-1.0, -1.0], -1.0),
    ]


def validate_dataset(samples: Sequence[Sample], input_dim: int) -> None:
    if not samples:
        raise EmptyInputError("dataset must contain at least one sample")
    for index, (inputs, _) in enumerate(samples):
        if len(inputs) != input_dim:
            raise InvalidInputError(
                f"sample {index} has {len(inputs)} inputs, expected {input_dim}"
            )


__all__ = ["Sample", "sign_and_dataset", "validate_dataset"]
