# File: src/mstair/objprint/xlogging/logger_factory.py
"""
Factory for CoreLogger instances that take part in the stdlib logger hierarchy.
"""

import logging
import sys
from pathlib import Path

from mstair.objprint.xlogging.core_logger import CoreLogger


__all__ = ["create_logger"]


def create_logger(name: str | None, *, level: int | str | None = None) -> CoreLogger:
    """
    Return the CoreLogger for `name`, creating it if needed.

    `__main__` (and an empty name) is replaced with the stem of the running script.
    A stdlib logger previously registered under the same name is replaced.

    :param name: Logger name, usually `__name__`.
    :param level: Optional level to set on the logger.
    """
    logger_name: str = name or ""
    if logger_name in {"", "__main__"}:
        executable = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
        logger_name = Path(executable).stem or "main"

    existing = logging.Logger.manager.loggerDict.get(logger_name)
    if isinstance(existing, CoreLogger):
        logger = existing
    else:
        if isinstance(existing, logging.Logger):
            del logging.Logger.manager.loggerDict[logger_name]
        logger = _get_core_logger_from_logging(logger_name)
        if isinstance(existing, logging.Logger):
            for child in list(logging.Logger.manager.loggerDict.values()):
                if isinstance(child, logging.Logger) and child.parent is existing:
                    child.parent = logger

    if level is not None:
        logger.setLevel(level)
    return logger


def _get_core_logger_from_logging(name: str) -> CoreLogger:
    """
    Create a CoreLogger through logging.getLogger().

    Temporarily sets CoreLogger as the logger class so the new logger is wired
    into the hierarchy (parent, propagation) and is visible to caplog.

    :raises TypeError: If getLogger() returns another class.
    """
    logging_class = logging.getLoggerClass()
    if logging_class is not CoreLogger:
        logging.setLoggerClass(CoreLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        if logging_class is not CoreLogger:
            logging.setLoggerClass(logging_class)
    if not isinstance(logger, CoreLogger):
        raise TypeError(f"Failed to create CoreLogger: {logger!r}")
    return logger


# End of file: src/mstair/objprint/xlogging/logger_factory.py
