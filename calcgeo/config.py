"""Runtime settings for calcgeo, resolved once at startup.

The CLI fills Settings from --debug/--no-debug, which falls back to
CALCGEO_DEBUG in the environment.
"""

from __future__ import annotations

from dataclasses import dataclass

DEBUG_ENV_VAR = "CALCGEO_DEBUG"


@dataclass(frozen=True)
class Settings:
    """Startup configuration."""

    debug: bool = False
