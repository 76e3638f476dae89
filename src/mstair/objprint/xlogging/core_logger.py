# File: src/mstair/objprint/xlogging/core_logger.py
"""
Structured logging with environment-driven configuration.

Example:
    >>> from mstair.objprint.xlogging import create_logger
    >>> logger = create_logger(__name__)
    >>> logger.info("Printing %s", person)  # person is rendered with print_to_string()
    >>>
    >>> with logger.prefix_with("[EXPORT]"):
    ...     logger.debug("Collecting members")

Features:
- TRACE level below DEBUG.
- Non-primitive arguments rendered as indented object printouts.
- Unknown keyword arguments moved into `extra`.
- Scoped message prefixes, safe across threads and tasks.

Only the root logger owns a handler (see `initialize_root()`); CoreLogger
instances propagate to it. Levels are set per logger from the environment via
`LogLevelConfig`.
"""

from __future__ import annotations

import contextvars
import logging
import os
import re
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, TextIO

from mstair.objprint.base import config as cfg
from mstair.objprint.base.constants import DEFAULT_LOG_DATEFMT, DEFAULT_LOG_FORMAT, DEFAULT_LOG_LEVEL
from mstair.objprint.base.string_helpers import count_printf_specifiers
from mstair.objprint.base.types import PRIMITIVE_TYPES
from mstair.objprint.xlogging.logger_constants import TRACE, initialize_logger_constants
from mstair.objprint.xlogging.logger_formatter import CoreFormatter
from mstair.objprint.xlogging.logger_util import LogLevelConfig


__all__: list[str] = [
    "CoreLogger",
    "initialize_root",
]

_LOG_KWARGS_FORBIDDEN: set[str] = {"filename", "lineno", "msg", "args", "levelname", "levelno"}
_LOG_KWARGS_STANDARD: set[str] = {"exc_info", "stack_info", "stacklevel", "extra"}
_LOG_ROOT_ATTR_NAME = "_objprint_corelogger_initialized"

_log_prefix: contextvars.ContextVar[str] = contextvars.ContextVar("log_prefix", default="")


class CoreLogger(logging.Logger):
    """
    Application logger that extends logging.Logger with:

    - A TRACE level.
    - Object printouts for non-primitive args.
    - A prefix context manager for scoped message prefixes.

    Handlers are not attached directly; all CoreLogger instances propagate
    to the root logger, which holds a single stderr handler per initialize_root().
    """

    def __init__(self, name: str, level: int | str = logging.NOTSET) -> None:
        """
        :param name: The logger name, typically the module name.
        :param level: Initial level. NOTSET resolves the level from the environment.
        """
        initialize_logger_constants()
        if level in {logging.NOTSET, "NOTSET", ""}:
            level = LogLevelConfig.get_instance().get_effective_level(name)
        super().__init__(name, level)

    def __repr__(self) -> str:
        level = self.getEffectiveLevel()
        return f"<{type(self).__name__} '{self.name}' {logging.getLevelName(level)}={level}>"

    def log(self, level: int, *args: Any, **kwargs: Any) -> None:  # type: ignore[override]
        """Emit a record at `level`; see the class docstring for argument handling."""
        self._emit(level, args, kwargs)

    def trace(self, *args: Any, **kwargs: Any) -> None:
        """Log a message at TRACE level (below DEBUG)."""
        self._emit(TRACE, args, kwargs)

    def debug(self, *args: Any, **kwargs: Any) -> None:  # type: ignore[override]
        self._emit(logging.DEBUG, args, kwargs)

    def info(self, *args: Any, **kwargs: Any) -> None:  # type: ignore[override]
        self._emit(logging.INFO, args, kwargs)

    def warning(self, *args: Any, **kwargs: Any) -> None:  # type: ignore[override]
        self._emit(logging.WARNING, args, kwargs)

    def error(self, *args: Any, **kwargs: Any) -> None:  # type: ignore[override]
        self._emit(logging.ERROR, args, kwargs)

    def critical(self, *args: Any, **kwargs: Any) -> None:  # type: ignore[override]
        self._emit(logging.CRITICAL, args, kwargs)

    def exception(self, *args: Any, **kwargs: Any) -> None:  # type: ignore[override]
        """Log a message at ERROR level with the active exception attached."""
        kwargs.setdefault("exc_info", True)
        self._emit(logging.ERROR, args, kwargs)

    def _emit(self, level: int, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        # Frames between the caller and super().log(): _emit() and the public method.
        initialize_root()
        if cfg.in_analysis_mode() or not self.isEnabledFor(level):
            return

        _move_kwargs_to_extra(kwargs)
        stacklevel: int = kwargs.pop("stacklevel", 1) + 2

        msg: Any = args[0] if args else ""
        log_args = _normalize_unsupported_args(msg, *args[1:])
        if prefix := _log_prefix.get():
            msg = f"{prefix}{msg}"

        super().log(
            level,
            msg,
            *log_args,
            exc_info=kwargs.get("exc_info"),
            stack_info=kwargs.get("stack_info", False),
            stacklevel=stacklevel,
            extra=kwargs.get("extra"),
        )

    @contextmanager
    def prefix_with(self, prefix: str) -> Iterator[None]:
        """
        Prefix every message logged in the current context with `prefix`.

        Nested prefixes accumulate: `outer > inner > message`.
        """
        formatted_prefix = (prefix + " > ") if not prefix.endswith("\n") else (prefix[:-1] + " >\n")
        token = _log_prefix.set(_log_prefix.get() + formatted_prefix)
        try:
            yield
        finally:
            _log_prefix.reset(token)


def initialize_root(
    fmt: str | None = None,
    datefmt: str | None = None,
    level: int | str | None = None,
    force: bool = False,
) -> None:
    """
    Idempotently configure the root logger for CoreLogger.

    - Ensures exactly one stderr StreamHandler with CoreFormatter exists.
    - `force=True` removes and recreates the stderr handler.
    - Sets the root level to `level`, or to WARNING if the root level is NOTSET.
    - Leaves handlers that do not write to stderr untouched.

    State is kept as an attribute of the root logger.

    :param fmt: Format string. Defaults to LOG_FORMAT or the package default.
    :param datefmt: Date format. Defaults to LOG_DATEFMT or the package default. A value
        without `%` directives drops the timestamp from the format.
    :param level: Root logger level (int or name).
    :param force: Reinitialize even if already initialized.
    """
    root: logging.Logger = logging.getLogger()
    if getattr(root, _LOG_ROOT_ATTR_NAME, False) and not force:
        return
    setattr(root, _LOG_ROOT_ATTR_NAME, True)

    initialize_logger_constants()

    if force:
        root.handlers = [h for h in root.handlers if not _is_stderr_handler(h)]

    _ensure_stderr_coreformatter(fmt=fmt, datefmt=datefmt)

    if level is not None:
        if isinstance(level, str):
            level = logging.getLevelNamesMapping().get(level.upper(), DEFAULT_LOG_LEVEL)
        root.setLevel(level)
    elif root.level == logging.NOTSET:
        root.setLevel(DEFAULT_LOG_LEVEL)


def _is_stderr_handler(handler: logging.Handler) -> bool:
    return isinstance(handler, logging.StreamHandler) and handler.stream is sys.stderr


def _ensure_stderr_coreformatter(*, fmt: str | None = None, datefmt: str | None = None) -> None:
    fmt = fmt or os.environ.get("LOG_FORMAT", DEFAULT_LOG_FORMAT)
    datefmt = os.environ.get("LOG_DATEFMT", DEFAULT_LOG_DATEFMT) if datefmt is None else datefmt
    if "%" not in datefmt:
        fmt = re.sub(r"\s*%\(asctime\)s\s*", " ", fmt)
        datefmt = None

    root: logging.Logger = logging.getLogger()
    stderr_handlers = [h for h in root.handlers if _is_stderr_handler(h)]
    if not stderr_handlers:
        handler: logging.StreamHandler[TextIO] = logging.StreamHandler(sys.stderr)
        handler.setFormatter(CoreFormatter(fmt, datefmt))
        root.addHandler(handler)
    elif not any(isinstance(h.formatter, CoreFormatter) for h in stderr_handlers):
        stderr_handlers[0].setFormatter(CoreFormatter(fmt, datefmt))


def _move_kwargs_to_extra(kwargs: dict[str, Any]) -> None:
    """
    Move non-standard keyword arguments into `kwargs["extra"]`.

    :raises ValueError: If a keyword would overwrite a reserved LogRecord attribute.
    """
    for key in list(kwargs):
        if key in _LOG_KWARGS_FORBIDDEN:
            raise ValueError(f"Invalid keyword argument '{key}'")
        if key not in _LOG_KWARGS_STANDARD:
            kwargs.setdefault("extra", {})[key] = kwargs.pop(key)


def _normalize_unsupported_args(msg: Any, *args: Any) -> tuple[Any, ...]:
    """
    Render non-primitive args with print_to_string() so `%s` shows their members.

    Exceptions are left as-is so `%s` shows their message.
    """
    if args and isinstance(msg, str) and count_printf_specifiers(msg) != len(args):
        logging.getLogger(__name__).warning(
            "Log format expects %d args, got %d: %r", count_printf_specifiers(msg), len(args), msg
        )

    from mstair.objprint.printer.printer_api import print_to_string

    normalized: list[Any] = []
    for arg in args:
        if isinstance(arg, (*PRIMITIVE_TYPES, BaseException)):
            normalized.append(arg)
            continue
        try:
            normalized.append(print_to_string(arg).rstrip("\n"))
        except Exception as exc:
            normalized.append(f"<unprintable: {type(arg).__name__}: {exc}>")
    return tuple(normalized)


# End of file: src/mstair/objprint/xlogging/core_logger.py
