"""
logsetup.py
Logging for rmount: [LEVEL] message on stderr, colored when stderr is a tty,
plus an optional plain log file. Default level is WARNING so the live
display on stdout is not interleaved with chatter.
"""

from __future__ import annotations
import logging, sys
from logging import Formatter, LogRecord
from logging.config import dictConfig
from pathlib import Path
from typing import Optional


class ColorLogFormatter(Formatter):
    """Formatter that outputs logs in a colored format"""

    RESET = "\033[0m"
    DIM = "\033[2m"
    BOLD = "\033[1m"
    RED = "\033[31m"
    YELLOW = "\033[33m"

    def format(self, record: LogRecord) -> str:
        text = super().format(record)
        if record.levelno >= logging.CRITICAL:
            return self.BOLD + self.RED + text + self.RESET
        if record.levelno >= logging.ERROR:
            return self.RED + text + self.RESET
        if record.levelno >= logging.WARNING:
            return self.YELLOW + text + self.RESET
        if record.levelno <= logging.DEBUG:
            return self.DIM + text + self.RESET
        return text


def setup_logging(level: str = "WARNING", color: bool | None = None, log_file: Optional[Path] = None) -> None:
    if color is None:
        color = sys.stderr.isatty()
    handlers = {
        "console_handler": {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "color_formatter" if color else "plain_formatter",
            "stream": "ext://sys.stderr",
        }
    }
    if log_file:
        handlers["file_handler"] = {
            "class": "logging.FileHandler",
            "level": "DEBUG",
            "formatter": "file_formatter",
            "filename": str(log_file),
        }
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "color_formatter": {
                    "class": "rmount.logsetup.ColorLogFormatter",
                    "format": "[{levelname}] {message}",
                    "style": "{",
                },
                "plain_formatter": {"format": "[{levelname}] {message}", "style": "{"},
                "file_formatter": {
                    "format": "{asctime} {name} [{levelname}] {message}",
                    "style": "{",
                },
            },
            "handlers": handlers,
            "root": {"level": logging.NOTSET, "handlers": list(handlers)},
        }
    )
