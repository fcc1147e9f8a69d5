"""Tests for logging setup and the TRACE level."""

import io
import logging

import pytest

from native2ascii.log import TRACE_LEVEL_NUM, setup_logging
from native2ascii.unicode.escape import escape


@pytest.fixture
def console_stream():
    stream = io.StringIO()
    yield stream
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.WARNING)


def test_trace_level_registered():
    """TRACE is a named level below DEBUG."""
    assert logging.getLevelName(TRACE_LEVEL_NUM) == "TRACE"
    assert TRACE_LEVEL_NUM < logging.DEBUG
    assert hasattr(logging.getLogger("native2ascii"), "trace")


def test_trace_messages(console_stream):
    """At TRACE level the conversion functions describe their work."""
    setup_logging("TRACE", stream=console_stream)
    escape(chr(0x2665))
    assert "Escaped 1 code unit(s) in 1 character(s)" in console_stream.getvalue()


def test_level_filters(console_stream):
    """Messages below the configured level are dropped."""
    setup_logging("WARNING", stream=console_stream)
    log = logging.getLogger("native2ascii.test")
    log.info("hidden")
    log.warning("shown [not markup]")
    output = console_stream.getvalue()
    assert "hidden" not in output
    assert "native2ascii.test: shown [not markup]" in output


def test_replaces_handlers(console_stream):
    """Calling setup_logging again does not duplicate output."""
    setup_logging("INFO", stream=console_stream)
    setup_logging("INFO", stream=console_stream)
    logging.getLogger("native2ascii.test").info("once")
    assert console_stream.getvalue().count("once") == 1


def test_log_file(console_stream, tmp_path):
    """A log file receives plain formatted records."""
    log_file = tmp_path / "out.log"
    setup_logging("DEBUG", str(log_file), stream=console_stream)
    logging.getLogger("native2ascii.test").debug("to the file")
    for handler in logging.getLogger().handlers:
        handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "DEBUG" in text
    assert "to the file" in text


def test_log_file_unwritable(console_stream, tmp_path):
    """An unopenable log file is reported but does not stop setup."""
    setup_logging("INFO", str(tmp_path / "missing" / "out.log"), stream=console_stream)
    assert "Failed to open log file" in console_stream.getvalue()
