"""Lightweight logging wrapper.

Provides simple leveled logging with an environment-based minimum level
(``FOUNTAIN_LOG_LEVEL``). Lines look like ``[12:00:01] INFO  anim: msg``.
"""

from __future__ import annotations

import os
import sys
import time
from dataclasses import dataclass
from typing import TextIO

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}
_DEFAULT_LEVEL_NAME = os.environ.get("FOUNTAIN_LOG_LEVEL", "INFO").upper()
_MIN_LEVEL = _LEVELS.get(_DEFAULT_LEVEL_NAME, 20)


@dataclass
class Logger:
    name: str
    stream: TextIO | None = sys.stdout
    min_level: int = _MIN_LEVEL

    def _log(self, level: str, *parts):
        if _LEVELS[level] < self.min_level:
            return
        if self.stream is None:
            return
        ts = time.strftime("%H:%M:%S")
        msg = " ".join(str(p) for p in parts)
        line = f"[{ts}] {level:<5} {self.name}: {msg}\n"
        try:
            self.stream.write(line)
            self.stream.flush()
        except (OSError, ValueError):
            # pythonw and some wrapped terminals have no usable stdout.
            return

    def debug(self, *parts):
        self._log("DEBUG", *parts)

    def info(self, *parts):
        self._log("INFO", *parts)

    def warn(self, *parts):
        self._log("WARN", *parts)

    def error(self, *parts):
        self._log("ERROR", *parts)


def get_logger(name: str = "fountain") -> Logger:
    return Logger(name)


__all__ = ["get_logger", "Logger"]
