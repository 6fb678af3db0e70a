"""Single-output linear unit with an additive delta-rule update."""
from __future__ import annotations

from typing import List, Sequence

from .errors import InvalidInputError

Vector = List[float]


class Unit:
    """Weighted sum plus bias over a fixed number of inputs.

    Inputs are paired with the leading weights. A shorter input vector leaves
    the trailing weights out of both :meth:`forward` and :meth:`backward`,
    which is how every unit after the first in a :class:`~delta_mlp.network.Network`
    is driven. A longer input vector is rejected.
    """

    def __init__(self, input_dim: int):
        if input_dim <= 0:
            raise ValueError("input_dim must be positive")
        self.weights: Vector = [0.0 for _ in range(input_dim)]
        self.bias = 0.0

    def __repr__(self) -> str:
        return f"Unit(input_dim={self.input_dim}, bias={self.bias})"

    @property
    def input_dim(self) -> int:
        return len(self.weights)

    def _check_inputs(self, inputs: Sequence[float]) -> None:
        if len(inputs) > len(self.weights):
            raise InvalidInputError(
                f"unit accepts at most {len(self.weights)} inputs, got {len(inputs)}"
            )

    def forward(self, inputs: Sequence[float]) -> float:
        self._check_inputs(inputs)
        total = sum(weight * value for weight, value in zip(self.weights, inputs))
        return total + self.bias

    def backward(self, inputs: Sequence[float], error: float, learning_rate: float) -> None:
        """Apply ``w_k += learning_rate * error * x_k`` and ``bias += learning_rate * error``.

        ``inputs`` must be the vector passed to the matching :meth:`forward`
        call. There is no activation derivative in the update.
        """

        self._check_inputs(inputs)
        for index, value in enumerate(inputs):
            self.weights[index] += learning_rate * error * value
        self.bias += learning_rate * error


__all__ = ["Unit", "Vector"]
