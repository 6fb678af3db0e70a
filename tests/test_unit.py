import pytest

from delta_mlp import InvalidInputError, Unit


def test_unit_starts_at_zero() -> None:
    unit = Unit(3)
    assert unit.weights == [0.0, 0.0, 0.0]
    assert unit.bias == 0.0
    assert unit.forward([1.0, -2.0, 5.0]) == 0.0


def test_forward_is_weighted_sum_plus_bias() -> None:
    unit = Unit(2)
    unit.weights = [0.5, -0.25]
    unit.bias = 0.1
    assert unit.forward([2.0, 4.0]) == pytest.approx(0.5 * 2.0 - 0.25 * 4.0 + 0.1)


def test_backward_applies_delta_rule_exactly() -> None:
    unit = Unit(2)
    unit.weights = [0.5, -0.25]
    unit.bias = 0.1
    inputs = [2.0, 4.0]
    error = 1.5
    learning_rate = 0.1

    unit.backward(inputs, error, learning_rate)

    assert unit.weights[0] == pytest.approx(0.5 + learning_rate * error * 2.0)
    assert unit.weights[1] == pytest.approx(-0.25 + learning_rate * error * 4.0)
    assert unit.bias == pytest.approx(0.1 + learning_rate * error)


def test_backward_with_positive_error_raises_weights() -> None:
    unit = Unit(3)
    unit.backward([1.0, 2.0, 3.0], 2.0, 0.1)
    assert unit.weights == pytest.approx([0.2, 0.4, 0.6])
    assert unit.bias == pytest.approx(0.2)


def test_short_input_uses_leading_weights_only() -> None:
    unit = Unit(2)
    unit.weights = [2.0, 100.0]
    assert unit.forward([3.0]) == pytest.approx(6.0)

    unit.backward([3.0], 1.0, 0.5)
    assert unit.weights == pytest.approx([3.5, 100.0])
    assert len(unit.weights) == 2


def test_long_input_is_rejected() -> None:
    unit = Unit(2)
    with pytest.raises(InvalidInputError):
        unit.forward([1.0, 2.0, 3.0])
    with pytest.raises(InvalidInputError):
        unit.backward([1.0, 2.0, 3.0], 1.0, 0.1)
    assert unit.weights == [0.0, 0.0]


def test_non_positive_dimension_is_rejected() -> None:
    with pytest.raises(ValueError):
        Unit(0)
