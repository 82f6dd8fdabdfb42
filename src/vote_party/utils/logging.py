"""Colored logging formatter for console output."""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, Any


class ColoredFormatter(logging.Formatter):
    """Formatter that wraps the level name in an ANSI colour.

    Colour is off when ``NO_COLOR`` is set or the target stream is not a TTY,
    so log files and CI output stay plain. Pass ``stream`` to check a stream
    other than stdout, or ``force_color`` to bypass detection.
    """

    LEVEL_COLORS: dict[int, str] = {
        logging.DEBUG: "\033[2;37m",  # dim grey
        logging.INFO: "\033[34m",  # blue
        logging.WARNING: "\033[33m",  # yellow
        logging.ERROR: "\033[31m",  # red
        logging.CRITICAL: "\033[1;41m",  # bold on red
    }
    RESET = "\033[0m"

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        *,
        stream: IO[Any] | None = None,
        force_color: bool | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(fmt, datefmt, **kwargs)
        self._stream = stream
        self._force_color = force_color

    def use_color(self) -> bool:
        if self._force_color is not None:
            return self._force_color
        if "NO_COLOR" in os.environ:
            return False
        stream = self._stream or sys.stdout
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_color():
            return super().format(record)
        colored = logging.makeLogRecord(record.__dict__)
        color = self.LEVEL_COLORS.get(record.levelno, "")
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)
