"""The calcgeo demo sequence.

Flow:
1. Banner
2. PI and squared(5)
3. Four counted operations plus squared() on 10.0 and 5.0, then the count
4. Point(3, 4) and its distance to the origin
5. Circle(5, 1, 2) with area and circumference
6. Debug line, only when debug is enabled
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console

from calcgeo.arithmetic import Calculator
from calcgeo.config import Settings
from calcgeo.constants import PI, squared
from calcgeo.geometry import Circle, Point
from calcgeo.logs import configure_logging

logger = logging.getLogger(__name__)

BANNER = "C++ Compilation Demo"
DEBUG_MESSAGE = "This is a debug message"


def plain_console() -> Console:
    """Console that writes text exactly as given: no markup, colour or wrapping."""
    return Console(
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
        color_system=None,
    )


def run_demo(
    console: Console,
    settings: Optional[Settings] = None,
    calculator: Optional[Calculator] = None,
) -> int:
    """Print the demo to console and return the exit status (always 0)."""
    settings = settings or Settings()
    calculator = calculator or Calculator(console)
    configure_logging(settings.debug, stream=console.file)

    console.print(BANNER)
    console.print("=" * len(BANNER))
    console.print()

    console.print(f"Value of PI: {PI:.5f}")
    console.print(f"SQUARE(5) = {squared(5)}")
    console.print()

    a, b = 10.0, 5.0
    console.print("Math Operations:")
    console.print(f"a = {a:.1f}, b = {b:.1f}")
    console.print(f"a + b = {calculator.add(a, b):.1f}")
    console.print(f"a - b = {calculator.subtract(a, b):.1f}")
    console.print(f"a * b = {calculator.multiply(a, b):.1f}")
    console.print(f"a / b = {calculator.divide(a, b):.1f}")
    console.print(f"a² = {calculator.squared(a):.1f}")
    console.print(f"Total calculations: {calculator.get_calculation_count()}")
    console.print()

    console.print("Geometry - Point:")
    p = Point(3.0, 4.0)
    p.print(console)
    console.print(f"Distance to origin: {p.distance_to_origin():.2f}")
    console.print()

    console.print("Geometry - Circle:")
    c = Circle(5.0, 1.0, 2.0)
    c.print(console)
    console.print(f"Area: {c.area():.2f}")
    console.print(f"Circumference: {c.circumference():.2f}")
    console.print()

    logger.debug(DEBUG_MESSAGE)
    return 0
