"""Counting calculator.

Calculator owns its calculation counter. Every add, subtract, multiply and
divide call bumps it by one; squared() does not, it is a helper rather than
a calculation.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console

from calcgeo.constants import squared as _squared
from calcgeo.output import emit

DIVISION_BY_ZERO_MESSAGE = "Error: Division by zero"


class Calculator:
    """Binary float operations with a running call count."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self._console = console
        self._count = 0

    def get_calculation_count(self) -> int:
        """Current number of counted calculations."""
        return self._count

    def reset(self) -> None:
        self._count = 0

    def add(self, a: float, b: float) -> float:
        self._count += 1
        return a + b

    def subtract(self, a: float, b: float) -> float:
        self._count += 1
        return a - b

    def multiply(self, a: float, b: float) -> float:
        self._count += 1
        return a * b

    def try_divide(self, a: float, b: float) -> Optional[float]:
        """Divide a by b, or return None when b is exactly zero.

        Counts as a calculation either way.
        """
        self._count += 1
        if b == 0:
            return None
        return a / b

    def divide(self, a: float, b: float) -> float:
        """Divide a by b, printing a diagnostic and returning 0.0 on a zero divisor.

        The 0.0 sentinel cannot be told apart from a real zero quotient;
        use try_divide() when the caller needs to know.
        """
        result = self.try_divide(a, b)
        if result is None:
            emit(DIVISION_BY_ZERO_MESSAGE, self._console)
            return 0.0
        return result

    @staticmethod
    def squared(x: float) -> float:
        return _squared(x)
