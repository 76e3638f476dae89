# File: src/mstair/objprint/log_helpers.py
"""
Convenience for writing object printouts to a log.
"""

from __future__ import annotations

import logging
from typing import Any

from mstair.objprint.base.string_helpers import fqn
from mstair.objprint.printer.printer_api import ConfigureFunction, print_to_string
from mstair.objprint.xlogging.core_logger import CoreLogger
from mstair.objprint.xlogging.logger_factory import create_logger


__all__ = ["log_object"]

_LOG: CoreLogger = create_logger(__name__)


def log_object(
    obj: Any,
    configure: ConfigureFunction | None = None,
    *,
    logger: logging.Logger | None = None,
    level: int = logging.DEBUG,
    title: str | None = None,
    stacklevel: int = 1,
) -> str | None:
    """
    Print `obj` and log the result as one multi-line record.

    Nothing is printed when `level` is disabled on the logger.

    :param obj: The value to print.
    :param configure: Optional configuration callback, as for print_to_string().
    :param logger: Target logger (stdlib or CoreLogger). Defaults to this module's logger.
    :param level: Log level of the record.
    :param title: First line of the message. Defaults to the value's type name.
    :param stacklevel: Stack level of the caller to report, relative to the caller of log_object().
    :return: The printed text, or None when the level is disabled.
    """
    target = logger if logger is not None else _LOG
    if not target.isEnabledFor(level):
        return None
    text = print_to_string(obj, configure)
    heading = title if title is not None else fqn(type(obj))
    target.log(level, "%s:\n%s", heading, text.rstrip("\n"), stacklevel=stacklevel + 1)
    return text


# End of file: src/mstair/objprint/log_helpers.py
