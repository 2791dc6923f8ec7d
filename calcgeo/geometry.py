"""Point and Circle value types.

Both describe themselves with two decimal places. print() writes that
description to a console (stdout when none is given).
"""

from __future__ import annotations

import math
from dataclasses import InitVar, dataclass, field
from typing import Optional

from rich.console import Console

from calcgeo.constants import PI, squared
from calcgeo.output import emit


@dataclass(frozen=True)
class Point:
    """A 2D point."""

    x: float = 0.0
    y: float = 0.0

    def describe(self) -> str:
        return f"Point({self.x:.2f}, {self.y:.2f})"

    def print(self, console: Optional[Console] = None) -> None:
        emit(self.describe(), console)

    def distance_to_origin(self) -> float:
        return math.sqrt(squared(self.x) + squared(self.y))


@dataclass(frozen=True)
class Circle:
    """A circle with a radius and an owned center Point.

    Built as Circle(radius, x, y); the coordinates become the center.
    The radius is stored as given; a negative radius is not rejected.
    """

    radius: float
    x: InitVar[float] = 0.0
    y: InitVar[float] = 0.0
    center: Point = field(init=False)

    def __post_init__(self, x: float, y: float) -> None:
        object.__setattr__(self, "center", Point(x, y))

    def area(self) -> float:
        return PI * squared(self.radius)

    def circumference(self) -> float:
        return 2 * PI * self.radius

    def describe(self) -> str:
        return f"Circle with radius {self.radius:.2f} at {self.center.describe()}"

    def print(self, console: Optional[Console] = None) -> None:
        """Write the radius prefix, then let the center print itself on the same line."""
        emit(f"Circle with radius {self.radius:.2f} at ", console, end="")
        self.center.print(console)
