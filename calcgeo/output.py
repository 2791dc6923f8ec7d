"""Writing text to a rich Console, or to stdout when there is none."""

from __future__ import annotations

from typing import Optional

from rich.console import Console


def emit(text: str, console: Optional[Console] = None, end: str = "\n") -> None:
    if console is not None:
        console.print(text, end=end)
    else:
        print(text, end=end)
