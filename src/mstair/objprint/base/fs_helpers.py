# File: src/mstair/objprint/base/fs_helpers.py
"""
File System Helpers
"""

import logging
from functools import cache
from pathlib import Path
from typing import IO, TypeAlias

import dotenv


StrPath: TypeAlias = str | Path


def fs_load_dotenv(
    *,
    logger: logging.Logger | None = None,
    dotenv_path: StrPath | None = None,
    stream: IO[str] | None = None,
    verbose: bool = False,
    override: bool = False,
    encoding: str | None = "utf-8",
) -> bool:
    """
    Parse a .env file and load the variables it defines into the environment.

    :param logger: Logger to use for warnings, if supplied verbose is enabled.
    :param dotenv_path: Absolute or relative path to .env file.
    :param stream: Text stream (such as `io.StringIO`) with .env content, used if `dotenv_path` is `None`.
    :param verbose: Whether to output a warning the .env file is missing.
    :param override: Whether to override existing environment variables.
    :return: True if at least one environment variable is set else False

    If both `dotenv_path` and `stream` are `None`, `find_dotenv()` searches from the
    current working directory upward.
    """
    if logger is not None:
        dotenv.main.logger = logger
        verbose = True
    if dotenv_path is None and stream is None:
        dotenv_path = _find_dotenv_cached(str(Path.cwd()))
        if not dotenv_path:
            return False
    return dotenv.load_dotenv(
        dotenv_path=dotenv_path,
        stream=stream,
        verbose=verbose,
        override=override,
        encoding=encoding,
    )


@cache
def _find_dotenv_cached(start_dir: str) -> str:
    """Locate the nearest .env file at or above `start_dir`, or return ""."""
    for directory in [Path(start_dir), *Path(start_dir).parents]:
        candidate = directory / ".env"
        if candidate.is_file():
            return str(candidate)
    return ""


# End of file: src/mstair/objprint/base/fs_helpers.py
