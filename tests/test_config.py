import math

import pytest

from delta_mlp import NetworkConfig, TrainingConfig


def test_network_config_normalises_sizes_to_tuple() -> None:
    config = NetworkConfig(layer_sizes=[2, 2, 1])
    assert config.layer_sizes == (2, 2, 1)
    assert config.learning_rate == 0.1


@pytest.mark.parametrize(
    "layer_sizes",
    [[], [2], [2, 0, 1], [2, -1], [2.0, 1], [True, 1]],
)
def test_network_config_rejects_bad_sizes(layer_sizes) -> None:
    with pytest.raises(ValueError):
        NetworkConfig(layer_sizes=layer_sizes)


def test_network_config_rejects_non_finite_learning_rate() -> None:
    with pytest.raises(ValueError):
        NetworkConfig(layer_sizes=[2, 1], learning_rate=math.nan)


def test_training_config_rejects_non_positive_epochs() -> None:
    assert TrainingConfig().epochs == 100
    with pytest.raises(ValueError):
        TrainingConfig(epochs=0)
