"""Tests for Settings and logging setup."""

import io
import logging

from calcgeo.config import Settings
from calcgeo.logs import configure_logging


# --- Settings ---

def test_default_is_not_debug():
    assert Settings().debug is False


# --- Logging ---

def test_configure_logging_does_not_stack_handlers():
    configure_logging(debug=False)
    logger = configure_logging(debug=True)
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_debug_record_format(capsys):
    configure_logging(debug=True)
    logging.getLogger("calcgeo.demo").debug("hello")
    assert capsys.readouterr().out == "[DEBUG] hello\n"


def test_debug_record_hidden_by_default(capsys):
    configure_logging(debug=False)
    logging.getLogger("calcgeo.demo").debug("hello")
    assert capsys.readouterr().out == ""


def test_records_go_to_given_stream(capsys):
    buf = io.StringIO()
    configure_logging(debug=True, stream=buf)
    logging.getLogger("calcgeo.demo").debug("hello")
    assert buf.getvalue() == "[DEBUG] hello\n"
    assert capsys.readouterr().out == ""
