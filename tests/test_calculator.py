import math

import pytest

from quizkit.calculator import Calculator


@pytest.fixture
def calc():
    return Calculator()


def test_basic_arithmetic(calc):
    assert calc.add(2.0, 3.0) == pytest.approx(5.0)
    assert calc.subtract(5.0, 3.0) == pytest.approx(2.0)
    assert calc.multiply(4.0, 3.0) == pytest.approx(12.0)
    assert calc.divide(10.0, 2.0) == pytest.approx(5.0)


def test_division_by_zero(calc):
    with pytest.raises(ValueError, match="Division by zero"):
        calc.divide(5.0, 0.0)


def test_division_by_tiny_value_is_rejected(calc):
    with pytest.raises(ValueError):
        calc.divide(1.0, 1e-20)


def test_power_function(calc):
    assert calc.power(2.0, 3.0) == pytest.approx(8.0)
    assert calc.power(5.0, 0.0) == pytest.approx(1.0)
    assert calc.power(9.0, 0.5) == pytest.approx(3.0)


def test_power_of_negative_base_with_fraction_is_nan(calc):
    result = calc.power(-8.0, 1.0 / 3.0)
    assert str(result) == "nan"


def test_power_of_zero_with_negative_exponent_is_infinite(calc):
    assert calc.power(0.0, -1.0) == math.inf


def test_power_overflow(calc):
    assert calc.power(10.0, 1000.0) == math.inf
    assert calc.power(-10.0, 1001.0) == -math.inf


def test_square_root(calc):
    assert calc.sqrt(9.0) == pytest.approx(3.0)
    assert calc.sqrt(16.0) == pytest.approx(4.0)
    with pytest.raises(ValueError):
        calc.sqrt(-1.0)


def test_memory_operations(calc):
    calc.store_in_memory(42.0)
    assert calc.recall_from_memory() == pytest.approx(42.0)

    calc.reset_memory()
    assert calc.recall_from_memory() == pytest.approx(0.0)


def test_memory_starts_at_zero(calc):
    assert calc.recall_from_memory() == 0.0


def test_memory_ignores_non_finite_values(calc):
    calc.store_in_memory(7.0)
    calc.store_in_memory(math.inf)
    calc.store_in_memory(math.nan)
    assert calc.recall_from_memory() == 7.0


def test_valid_number_check(calc):
    assert calc.is_valid_number(42.0) is True
    assert calc.is_valid_number(-3.14) is True
    assert calc.is_valid_number(0.0) is True


def test_invalid_number_check(calc):
    assert calc.is_valid_number(math.inf) is False
    assert calc.is_valid_number(-math.inf) is False
    assert calc.is_valid_number(math.nan) is False