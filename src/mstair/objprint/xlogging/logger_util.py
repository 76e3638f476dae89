# File: src/mstair/objprint/xlogging/logger_util.py
"""
Environment variable-driven log level configuration.

Levels are read from:
- `LOG_LEVEL` / `LOG_LEVELS`: a list of `pattern:LEVEL` fragments separated by
  spaces, commas or semicolons. A bare `LEVEL` sets the default.
- `LOG_LEVEL_<MODULE>`: scopes the fragments to a module, where `_` in the
  suffix stands for `.` and `__` for a literal underscore.

A `.env` file in the working directory (or a parent) is loaded first, so it can
supply any of these variables.

Example:
    LOG_LEVELS="WARNING mstair.objprint.printer:DEBUG mstair.*.view:TRACE"
    LOG_LEVEL_MSTAIR_OBJPRINT_LOG__HELPERS=INFO
"""

from __future__ import annotations

import fnmatch
import logging
import os
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import ClassVar, Final, NamedTuple

from mstair.objprint.base.constants import DEFAULT_LOG_LEVEL
from mstair.objprint.base.fs_helpers import fs_load_dotenv
from mstair.objprint.xlogging.logger_constants import initialize_logger_constants


__all__ = ["LogEnvVar", "LogLevelConfig"]

_FRAGMENT_SEPARATOR_RX: Final[re.Pattern[str]] = re.compile(r"[;, ]+")
_ASSIGNMENT_RX: Final[re.Pattern[str]] = re.compile(r"[:=]+")

_log_level_config_instance: LogLevelConfig | None = None


@dataclass(slots=True)
class LogEnvVar:
    """One `LOG_LEVEL*` environment variable, with the module it is scoped to."""

    NAME_RX: ClassVar[re.Pattern[str]] = re.compile(r"^(?P<BASENAME>LOG_LEVELS?)(?P<SUFFIX>(?:_[A-Z][A-Z0-9_]*)*)$")

    name: str = field(default="", repr=False)
    module: str = ""
    value: str = field(default="", repr=False)

    @classmethod
    def from_env_var(cls, name: str, value: str) -> LogEnvVar | None:
        """Return a LogEnvVar if `name` is a log level variable, else None."""
        match = cls.NAME_RX.match(name)
        if match is None:
            return None
        suffix = match["SUFFIX"].lstrip("_")
        module = ""
        if suffix and suffix.upper() != "ROOT":
            module = suffix.replace("__", "\0").replace("_", ".").replace("\0", "_").lower()
        return cls(name=name, module=module, value=value)

    @classmethod
    def from_environ(cls) -> Iterator[LogEnvVar]:
        """Yield every log level variable in the environment, after loading `.env`."""
        fs_load_dotenv()
        for name, value in sorted(os.environ.items(), reverse=True):
            env_var = cls.from_env_var(name, value)
            if env_var is not None:
                yield env_var


class LogEnvPatternLevel(NamedTuple):
    pattern: str
    level: int


@dataclass(slots=True)
class LogLevelConfig:
    """
    Resolve logger levels from environment variables.

    Precedence: exact name > nearest ancestor > most specific glob > default > fallback.
    """

    pattern_to_level: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.pattern_to_level:
            self.update_from_environment()

    @classmethod
    def get_instance(cls) -> LogLevelConfig:
        """Return the shared instance, creating it from the environment on first use."""
        global _log_level_config_instance
        if _log_level_config_instance is None:
            initialize_logger_constants()
            _log_level_config_instance = cls()
        return _log_level_config_instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the shared instance so the next lookup re-reads the environment."""
        global _log_level_config_instance
        _log_level_config_instance = None

    def update_from_environment(self) -> None:
        self.pattern_to_level.clear()
        for var in LogEnvVar.from_environ():
            for entry in self.parse_log_var(var):
                self.pattern_to_level[entry.pattern] = entry.level

    def parse_log_var(self, var: LogEnvVar) -> Iterator[LogEnvPatternLevel]:
        """Yield the pattern/level pairs in one variable. Unknown level names are skipped."""
        level_names = _level_names_mapping()
        for fragment in _FRAGMENT_SEPARATOR_RX.split(var.value):
            fragment = fragment.strip()
            if not fragment:
                continue
            parts = _ASSIGNMENT_RX.split(fragment, maxsplit=1)
            pattern, level_name = ("", parts[0]) if len(parts) == 1 else (parts[0], parts[1])
            pattern = pattern.strip().strip("'\"")
            level_name = level_name.strip().strip("'\"").upper()

            if var.module:
                pattern = var.module if pattern in {"", "root"} else f"{var.module}.{pattern}"
            if pattern.lower() == "root":
                pattern = ""

            level = level_names.get(level_name, logging.NOTSET)
            if level == logging.NOTSET:
                continue
            yield LogEnvPatternLevel(pattern, level)

    def get_effective_level(self, logger_name: str, *, default: int = DEFAULT_LOG_LEVEL) -> int:
        """Return the configured level for `logger_name`, or `default`."""
        name = logger_name.lower()
        named: dict[str, int] = {k.lower(): v for k, v in self.pattern_to_level.items() if k}

        if name in named:
            return named[name]

        parts = name.split(".")
        for end in range(len(parts) - 1, 0, -1):
            ancestor = ".".join(parts[:end])
            if ancestor in named:
                return named[ancestor]

        best_level: int | None = None
        best_score = -1
        for pattern, level in named.items():
            if not any(ch in pattern for ch in "*?[") or not fnmatch.fnmatch(name, pattern):
                continue
            score = min((i for i, ch in enumerate(pattern) if ch in "*?["), default=len(pattern))
            if score > best_score:
                best_score, best_level = score, level
        if best_level is not None:
            return best_level

        return self.pattern_to_level.get("", default)


def _level_names_mapping() -> dict[str, int]:
    return {
        k.upper(): v
        for k, v in logging.getLevelNamesMapping().items()
        if isinstance(k, str) and k.isupper() and isinstance(v, int)
    }


# End of file: src/mstair/objprint/xlogging/logger_util.py
