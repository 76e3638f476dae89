# File: src/mstair/objprint/printer/errors.py
"""
Exceptions raised by the object printer.

Each class also derives from the built-in exception a caller would naturally
catch (ValueError for misconfiguration, IndexError for out-of-range truncation).
Exceptions raised inside caller-supplied formatters are never wrapped.
"""

from __future__ import annotations


__all__ = [
    "ObjectPrintingError",
    "PrintingConfigError",
    "TruncationRangeError",
]


class ObjectPrintingError(Exception):
    """Base class for errors raised by mstair.objprint.printer."""


class PrintingConfigError(ObjectPrintingError, ValueError):
    """A fluent configuration call was given an argument it cannot honor."""


class TruncationRangeError(ObjectPrintingError, IndexError):
    """A truncation length is negative or longer than the string being truncated."""

    max_len: int
    """The requested length."""

    actual_len: int | None
    """Length of the string being truncated, or None when rejected at configuration time."""

    def __init__(self, max_len: int, actual_len: int | None = None) -> None:
        self.max_len = max_len
        self.actual_len = actual_len
        if actual_len is None:
            message = f"Truncation length must be non-negative, got {max_len}"
        else:
            message = f"Truncation length {max_len} exceeds string length {actual_len}"
        super().__init__(message)


# End of file: src/mstair/objprint/printer/errors.py
