"""
Tests for logging setup.
"""
import logging
import pytest
from rmount.logsetup import ColorLogFormatter, setup_logging


@pytest.fixture(autouse=True)
def restore_root():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def record(level):
    return logging.LogRecord("rmount", level, __file__, 1, "hello %s", ("there",), None)


def test_color_formatter():
    f = ColorLogFormatter("[{levelname}] {message}", style="{")
    assert f.format(record(logging.WARNING)) == "\033[33m[WARNING] hello there\033[0m"
    assert f.format(record(logging.ERROR)) == "\033[31m[ERROR] hello there\033[0m"
    assert f.format(record(logging.INFO)) == "[INFO] hello there"


def test_setup_logging_with_file(tmp_path):
    log_file = tmp_path / "rmount.log"
    setup_logging("WARNING", color=False, log_file=log_file)
    logging.getLogger("rmount.test").debug("quiet on console, kept in file")
    for h in logging.getLogger().handlers:
        h.flush()
    assert "quiet on console, kept in file" in log_file.read_text()
