"""CLI for calcgeo.

Usage:
    python -m calcgeo               # Print the demo
    python -m calcgeo --debug       # Also print the debug line
    CALCGEO_DEBUG=1 python -m calcgeo
"""

from __future__ import annotations

import typer

from calcgeo.config import DEBUG_ENV_VAR, Settings
from calcgeo.demo import plain_console, run_demo

app = typer.Typer(
    name="calcgeo",
    help="Arithmetic and geometry console demo",
    add_completion=False,
)


@app.command()
def main(
    debug: bool = typer.Option(
        False, "--debug/--no-debug",
        envvar=DEBUG_ENV_VAR,
        help="Print the debug line",
    ),
) -> None:
    """Run the demo sequence."""
    code = run_demo(plain_console(), Settings(debug=debug))
    raise typer.Exit(code)


if __name__ == "__main__":
    app()
