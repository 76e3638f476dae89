# File: src/mstair/objprint/base/test_config.py

from __future__ import annotations

import threading

import pytest

from mstair.objprint.base.config import (
    analysis_mode_context,
    in_analysis_mode,
    in_desktop_mode,
    in_test_mode,
)


@pytest.mark.unit
def test_test_mode_detected_under_pytest() -> None:
    assert in_test_mode() is True


@pytest.mark.unit
def test_overrides_are_thread_local() -> None:
    seen: list[bool] = []
    in_test_mode(override=False)
    try:
        worker = threading.Thread(target=lambda: seen.append(in_test_mode()))
        worker.start()
        worker.join()
        assert in_test_mode() is False
        assert seen == [True]
    finally:
        in_test_mode(unset_override=True)
    assert in_test_mode() is True


@pytest.mark.unit
def test_analysis_mode_disables_test_and_desktop_mode() -> None:
    assert in_analysis_mode() is False
    with analysis_mode_context():
        with analysis_mode_context():
            assert in_analysis_mode() is True
        assert in_analysis_mode() is True
        assert in_test_mode() is False
        assert in_desktop_mode() is False
    assert in_analysis_mode() is False


@pytest.mark.unit
def test_desktop_mode_override() -> None:
    try:
        assert in_desktop_mode(override=False) is False
        assert in_desktop_mode() is False
        assert in_desktop_mode(override=True) is True
    finally:
        in_desktop_mode(unset_override=True)
    assert in_desktop_mode() is True  # test runner counts as desktop


# End of file: src/mstair/objprint/base/test_config.py
