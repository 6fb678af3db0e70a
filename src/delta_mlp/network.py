"""Chain of linear units trained with a sign-thresholded delta rule."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from tqdm.auto import tqdm

from .config import NetworkConfig, TrainingConfig
from .data import Sample
from .errors import EmptyInputError, InvalidInputError
from .unit import Unit, Vector

logger = logging.getLogger(__name__)


@dataclass
class TrainingHistory:
    """Container storing the average loss of every epoch run by :meth:`Network.fit`."""

    losses: list[float] = field(default_factory=list)


def threshold(value: float) -> float:
    return 1.0 if value >= 0.0 else -1.0


class Network:
    """Ordered chain of :class:`Unit` objects feeding scalars forward.

    Unit ``i`` is declared with ``layer_sizes[i]`` weights, but only the first
    unit sees the full input vector. Each later unit receives the previous
    unit's output wrapped as a one-element list, so only its first weight is
    ever used.

    Training uses a simplified rule rather than a true gradient chain:

    * The output error is ``true_label - threshold(final_output)``.
    * Walking backwards, each unit applies the delta rule with the current
      error, then the error for the preceding unit becomes
      ``unit.weights[0] * error`` using the freshly updated weight.
    * The returned loss is the square of the error left after the first unit,
      not of the output error.
    """

    def __init__(self, layer_sizes: Sequence[int], learning_rate: float = 0.1):
        self.config = NetworkConfig(layer_sizes=layer_sizes, learning_rate=learning_rate)
        self.learning_rate = self.config.learning_rate
        self.units = [Unit(size) for size in self.config.layer_sizes[:-1]]

    @classmethod
    def from_config(cls, config: NetworkConfig) -> "Network":
        return cls(config.layer_sizes, config.learning_rate)

    def __repr__(self) -> str:
        return f"Network(layer_sizes={list(self.config.layer_sizes)}, learning_rate={self.learning_rate})"

    @property
    def input_dim(self) -> int:
        return self.units[0].input_dim

    def _check_inputs(self, inputs: Sequence[float]) -> None:
        if len(inputs) != self.input_dim:
            raise InvalidInputError(
                f"expected {self.input_dim} inputs, got {len(inputs)}"
            )

    def predict(self, inputs: Sequence[float]) -> float:
        self._check_inputs(inputs)
        layer_inputs: Vector = list(inputs)
        for unit in self.units:
            layer_inputs = [unit.forward(layer_inputs)]
        return layer_inputs[0]

    def train(self, inputs: Sequence[float], true_label: float) -> float:
        """Run one update on a single sample and return its squared error."""

        self._check_inputs(inputs)
        layer_inputs: list[Vector] = [list(inputs)]
        layer_outputs: list[float] = []
        for unit in self.units:
            output = unit.forward(layer_inputs[-1])
            layer_inputs.append([output])
            layer_outputs.append(threshold(output))

        error = true_label - layer_outputs[-1]
        for unit, unit_inputs in reversed(list(zip(self.units, layer_inputs))):
            unit.backward(unit_inputs, error, self.learning_rate)
            error = unit.weights[0] * error
        return error**2

    def evaluate(self, test_data: Sequence[Sample]) -> float:
        """Fraction of samples whose predicted sign matches the label's sign.

        A prediction or label of exactly ``0.0`` counts as positive.
        """

        if not test_data:
            raise EmptyInputError("test_data must contain at least one sample")
        correct = 0
        for inputs, true_label in test_data:
            if (self.predict(inputs) >= 0.0) == (true_label >= 0.0):
                correct += 1
        return correct / len(test_data)

    def fit(
        self,
        samples: Sequence[Sample],
        config: TrainingConfig | None = None,
    ) -> TrainingHistory:
        """Train on ``samples`` in order for ``config.epochs`` epochs."""

        if not samples:
            raise EmptyInputError("samples must contain at least one sample")
        config = config or TrainingConfig()
        history = TrainingHistory()

        epochs = tqdm(range(config.epochs), desc="Training", disable=not config.show_progress)
        for epoch in epochs:
            epoch_loss = 0.0
            for inputs, true_label in samples:
                epoch_loss += self.train(inputs, true_label)
            average = epoch_loss / len(samples)
            history.losses.append(average)
            logger.debug("epoch %d/%d average loss %.6f", epoch + 1, config.epochs, average)

        logger.info("trained %d epochs, final average loss %.6f", config.epochs, history.losses[-1])
        return history

    def parameters(self) -> dict[str, list[dict[str, Vector | float]]]:
        return {
            "units": [
                {"weights": unit.weights.copy(), "bias": unit.bias}
                for unit in self.units
            ]
        }


__all__ = ["Network", "TrainingHistory", "threshold"]
