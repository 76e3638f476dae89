# File: src/mstair/objprint/base/test_fs_helpers.py

from __future__ import annotations

import io
import os
from pathlib import Path

import pytest

from mstair.objprint.base import fs_helpers
from mstair.objprint.base.fs_helpers import fs_load_dotenv
from mstair.objprint.base.string_helpers import count_printf_specifiers, fqn


@pytest.mark.unit
def test_load_dotenv_from_stream(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OBJPRINT_TEST_STREAM", raising=False)
    assert fs_load_dotenv(stream=io.StringIO("OBJPRINT_TEST_STREAM=1\n")) is True
    assert os.environ["OBJPRINT_TEST_STREAM"] == "1"
    monkeypatch.delenv("OBJPRINT_TEST_STREAM")


@pytest.mark.unit
def test_load_dotenv_searches_parent_directories(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("OBJPRINT_TEST_PARENT=yes\n", encoding="utf-8")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)
    monkeypatch.delenv("OBJPRINT_TEST_PARENT", raising=False)
    fs_helpers._find_dotenv_cached.cache_clear()
    try:
        assert fs_load_dotenv() is True
        assert os.environ["OBJPRINT_TEST_PARENT"] == "yes"
    finally:
        monkeypatch.delenv("OBJPRINT_TEST_PARENT", raising=False)
        fs_helpers._find_dotenv_cached.cache_clear()


@pytest.mark.unit
def test_load_dotenv_does_not_override_by_default(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / "custom.env"
    env_file.write_text("OBJPRINT_TEST_KEEP=new\n", encoding="utf-8")
    monkeypatch.setenv("OBJPRINT_TEST_KEEP", "old")
    fs_load_dotenv(dotenv_path=env_file)
    assert os.environ["OBJPRINT_TEST_KEEP"] == "old"
    fs_load_dotenv(dotenv_path=env_file, override=True)
    assert os.environ["OBJPRINT_TEST_KEEP"] == "new"


@pytest.mark.unit
def test_fqn() -> None:
    assert fqn(int) == "int"
    assert fqn(Path).startswith("pathlib.")
    assert fqn(Path).endswith(".Path")


@pytest.mark.unit
@pytest.mark.parametrize(
    ("fmt", "count"),
    [("plain", 0), ("%s and %d", 2), ("100%% %(name)s", 1), ("%-5.2f%%", 1)],
)
def test_count_printf_specifiers(fmt: str, count: int) -> None:
    assert count_printf_specifiers(fmt) == count


# End of file: src/mstair/objprint/base/test_fs_helpers.py
