# File: src/mstair/objprint/base/constants.py

from __future__ import annotations

import logging
from typing import Final


# == Output layout ==

NEWLINE: Final[str] = "\n"
"""Line terminator appended after every emitted line."""

INDENT_UNIT: Final[str] = "\t"
"""One nesting level of indentation."""

NULL_TEXT: Final[str] = "null"
"""Rendering of an absent (None) value."""

MEMBER_SEPARATOR: Final[str] = " = "
"""Placed between a member name and its rendered value."""

CYCLE_MARKER_FMT: Final[str] = "<cyclic reference to {label}>"
"""Emitted instead of re-expanding an object that is already being printed."""

COLLECTION_OPEN: Final[str] = "["
COLLECTION_CLOSE: Final[str] = "]"

# == Logging ==

DEFAULT_LOG_LEVEL: Final[int] = logging.WARNING
DEFAULT_LOG_TZ: Final[str] = "US/Eastern"
DEFAULT_LOG_FORMAT: Final[str] = r"%(levelName)s %(asctime)s %(fileAndLine)s %(message)s"
DEFAULT_LOG_DATEFMT: Final[str] = "%-I:%M%p"


# End of file: src/mstair/objprint/base/constants.py
