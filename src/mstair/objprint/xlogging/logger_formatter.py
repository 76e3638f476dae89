# File: src/mstair/objprint/xlogging/logger_formatter.py
"""
Log record formatting for CoreLogger.

Adds the record fields used by the default format string:

- `levelName`: the level name, colored by level.
- `fileAndLine`: `path/to/file.py:123`, relative to the working directory when possible.
- `method`: `function()`.

Timestamps are rendered in the `LOG_TZ` time zone. Color codes are emitted
only in desktop mode (see `mstair.objprint.base.config.in_desktop_mode`).
"""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Final, Literal

import pytz
from colorama import Fore

import mstair.objprint.base.config as cfg
from mstair.objprint.base.constants import DEFAULT_LOG_TZ


__all__ = ["CoreFormatter", "get_color_code", "rgb_code"]

FormatStyle = Literal["%", "{", "$"]


def rgb_code(r: int, g: int, b: int) -> str:
    """Return the ANSI escape sequence for a 24-bit foreground color."""
    return f"\033[38;2;{max(0, min(255, r))};{max(0, min(255, g))};{max(0, min(255, b))}m"


COLOR_MAP: Final[dict[str | None, str]] = {
    "fileAndLine": rgb_code(64, 128, 160),
    "method": rgb_code(48, 192, 160),
    "TRACE": rgb_code(96, 0, 64),
    "DEBUG": Fore.LIGHTBLACK_EX,
    "INFO": rgb_code(184, 184, 216),
    "WARNING": rgb_code(192, 176, 0),
    "ERROR": rgb_code(224, 128, 0),
    "CRITICAL": rgb_code(255, 64, 64),
    None: Fore.RESET,
}


def get_color_code(key: str | None = None) -> str:
    """
    Return the color escape for `key`: a COLOR_MAP key, a `#rrggbb` value, or a colorama Fore name.

    Returns "" when not in desktop mode, and the reset code for unknown keys.
    """
    if not cfg.in_desktop_mode():
        return ""
    if not key or key == "RESET":
        return Fore.RESET
    if key in COLOR_MAP:
        return COLOR_MAP[key]
    if key.startswith("#") and len(key) == 7:
        return rgb_code(*(int(key[i : i + 2], 16) for i in (1, 3, 5)))
    return getattr(Fore, key.upper(), Fore.RESET)


class CoreFormatter(logging.Formatter):
    """Formatter that adds colored level and location fields and zone-aware timestamps."""

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: FormatStyle = "%",
        validate: bool = True,
        *,
        tz: str | None = None,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt, style=style, validate=validate)
        self.tz = pytz.timezone(tz or os.environ.get("LOG_TZ") or DEFAULT_LOG_TZ)

    def format(self, record: logging.LogRecord) -> str:
        record.levelName = get_color_code(record.levelname) + record.levelname + get_color_code()
        record.fileAndLine = self.format_fileAndLine(record.pathname, record.lineno)
        record.method = get_color_code("method") + f"{record.funcName}()" + get_color_code()
        return super().format(record)

    @staticmethod
    def format_file(file: str) -> str:
        """Return `file` relative to the working directory when below it, else absolute, in POSIX form."""
        if not file:
            return "<unknown file>"
        path = Path(file)
        try:
            return path.absolute().relative_to(Path.cwd()).as_posix()
        except ValueError:
            return path.absolute().as_posix()

    def format_fileAndLine(self, file: str, lineno: int) -> str:
        return get_color_code("fileAndLine") + f"{self.format_file(file)}:{lineno}" + get_color_code()

    def formatTime(self, record: Any, datefmt: str | None = None) -> str:
        """Format the record time in the configured zone; `%-I` style directives are accepted."""
        moment = datetime.fromtimestamp(record.created, self.tz)
        if not datefmt:
            return moment.isoformat()
        text = moment.strftime(datefmt.replace("%-", "%"))
        return text.replace("AM", "am").replace("PM", "pm").lstrip("0")


# End of file: src/mstair/objprint/xlogging/logger_formatter.py
