"""Logging setup for calcgeo.

Log records from the calcgeo package are written as "[LEVEL] message".
DEBUG records only show up when debug is enabled.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "[%(levelname)s] %(message)s"

_HANDLER_NAME = "calcgeo-stream"


def configure_logging(debug: bool = False, stream: Optional[TextIO] = None) -> logging.Logger:
    """Install a single stream handler on the calcgeo logger.

    Args:
        debug: Let DEBUG records through.
        stream: Where records go. Defaults to sys.stdout at call time.

    Safe to call repeatedly: an earlier handler installed here is replaced,
    never stacked.
    """
    logger = logging.getLogger("calcgeo")
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False
    return logger
