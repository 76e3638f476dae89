# File: src/mstair/objprint/test_log_helpers.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import pytest

from mstair.objprint.log_helpers import log_object


@dataclass
class Item:
    name: str
    price: float


@pytest.mark.unit
def test_log_object_writes_one_record(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("test.objprint.log_object")
    with caplog.at_level(logging.DEBUG, logger=logger.name):
        text = log_object(Item("pen", 1.5), logger=logger, title="basket")
    assert text is not None
    record = caplog.records[-1]
    assert record.getMessage() == "basket:\n" + text.rstrip("\n")
    assert record.funcName == "test_log_object_writes_one_record"


@pytest.mark.unit
def test_log_object_applies_configuration(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("test.objprint.log_object")
    with caplog.at_level(logging.DEBUG, logger=logger.name):
        log_object(Item("pen", 1.5), lambda cfg: cfg.excluding("price"), logger=logger, level=logging.INFO)
    message = caplog.records[-1].getMessage()
    assert "\tname = pen" in message
    assert "price" not in message
    assert caplog.records[-1].levelno == logging.INFO


@pytest.mark.unit
def test_log_object_skips_printing_when_disabled() -> None:
    logger = logging.getLogger("test.objprint.log_object.quiet")
    logger.setLevel(logging.ERROR)
    printed: list[object] = []

    def spy(cfg: Any) -> Any:
        printed.append(cfg)
        return cfg

    assert log_object(Item("pen", 1.5), spy, logger=logger) is None
    assert printed == []


@pytest.mark.unit
def test_log_object_default_logger(caplog: pytest.LogCaptureFixture) -> None:
    from mstair.objprint import log_helpers

    previous = log_helpers._LOG.level
    log_helpers._LOG.setLevel(logging.DEBUG)
    try:
        with caplog.at_level(logging.DEBUG):
            log_object([1, 2])
    finally:
        log_helpers._LOG.setLevel(previous)
    assert caplog.records[-1].getMessage() == "list:\nlist[int]\n[\n\t1\n\t2\n]"
    assert caplog.records[-1].funcName == "test_log_object_default_logger"


# End of file: src/mstair/objprint/test_log_helpers.py
