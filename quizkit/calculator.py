"""A small calculator with basic arithmetic and a single memory cell."""

from __future__ import annotations

import math
import sys

_EPSILON = sys.float_info.epsilon


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value == int(value) and int(value) % 2 == 1


class Calculator:
    """Basic arithmetic on floats, with one memory slot."""

    def __init__(self) -> None:
        self._memory = 0.0

    def add(self, a: float, b: float) -> float:
        return a + b

    def subtract(self, a: float, b: float) -> float:
        return a - b

    def multiply(self, a: float, b: float) -> float:
        return a * b

    def divide(self, a: float, b: float) -> float:
        """Divide a by b; a divisor closer to zero than machine epsilon is an error."""
        if abs(b) < _EPSILON:
            raise ValueError("Division by zero")
        return a / b

    def power(self, base: float, exponent: float) -> float:
        """Raise base to exponent, yielding inf or nan where a float result has no finite value."""
        negative_result = base < 0 and _is_odd_integer(exponent)
        if base == 0 and exponent < 0:
            negative_zero = math.copysign(1.0, base) < 0
            sign = -1.0 if negative_zero and _is_odd_integer(-exponent) else 1.0
            return math.copysign(math.inf, sign)
        try:
            return math.pow(base, exponent)
        except ValueError:
            return math.nan
        except OverflowError:
            return -math.inf if negative_result else math.inf

    def sqrt(self, value: float) -> float:
        if value < 0:
            raise ValueError("Cannot take square root of negative number")
        return math.sqrt(value)

    def is_valid_number(self, value: float) -> bool:
        """True when value is neither infinite nor NaN."""
        return math.isfinite(value)

    def reset_memory(self) -> None:
        self._memory = 0.0

    def store_in_memory(self, value: float) -> None:
        """Store value in memory; non-finite values are ignored."""
        if self.is_valid_number(value):
            self._memory = value

    def recall_from_memory(self) -> float:
        return self._memory