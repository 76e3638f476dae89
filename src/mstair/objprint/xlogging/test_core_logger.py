# File: src/mstair/objprint/xlogging/test_core_logger.py
"""
Tests for CoreLogger, CoreFormatter, root initialization and create_logger().
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from dataclasses import dataclass

import pytest

from mstair.objprint.base.config import analysis_mode_context, in_desktop_mode
from mstair.objprint.xlogging import core_logger as cl
from mstair.objprint.xlogging.core_logger import CoreLogger, initialize_root
from mstair.objprint.xlogging.logger_constants import TRACE
from mstair.objprint.xlogging.logger_factory import create_logger
from mstair.objprint.xlogging.logger_formatter import CoreFormatter, get_color_code


@dataclass
class Point:
    x: int
    y: int


@pytest.fixture
def clean_logging() -> Iterator[None]:
    """Reset root logger state (handlers, level, init flag) around tests."""
    root = logging.getLogger()
    prev_level = root.level
    prev_handlers = list(root.handlers)
    prev_attr = getattr(root, cl._LOG_ROOT_ATTR_NAME, None)

    root.handlers = []
    root.setLevel(logging.WARNING)
    if hasattr(root, cl._LOG_ROOT_ATTR_NAME):
        delattr(root, cl._LOG_ROOT_ATTR_NAME)

    yield

    root.handlers = prev_handlers
    root.setLevel(prev_level)
    if prev_attr is None:
        if hasattr(root, cl._LOG_ROOT_ATTR_NAME):
            delattr(root, cl._LOG_ROOT_ATTR_NAME)
    else:
        setattr(root, cl._LOG_ROOT_ATTR_NAME, prev_attr)


@pytest.fixture
def no_colors() -> Iterator[None]:
    in_desktop_mode(override=False)
    yield
    in_desktop_mode(unset_override=True)


@pytest.fixture
def logger() -> CoreLogger:
    return create_logger("test.objprint.core_logger", level=TRACE)


class TestCoreLogger:
    def test_create_logger_returns_same_instance(self, logger: CoreLogger) -> None:
        assert create_logger("test.objprint.core_logger") is logger
        assert isinstance(logger, CoreLogger)
        assert logger.parent is not None

    def test_create_logger_replaces_stdlib_logger(self) -> None:
        plain = logging.getLogger("test.objprint.replaced")
        child = logging.getLogger("test.objprint.replaced.child")
        replacement = create_logger("test.objprint.replaced")
        assert isinstance(replacement, CoreLogger)
        assert replacement is not plain
        assert child.parent is replacement

    def test_non_primitive_args_are_printed(
        self, logger: CoreLogger, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(TRACE):
            logger.info("point: %s", Point(1, 2))
        message = caplog.records[-1].getMessage()
        assert message.endswith("Point\n\tx = 1\n\ty = 2")

    def test_primitive_args_pass_through(self, logger: CoreLogger, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(TRACE):
            logger.warning("%s/%d/%s", "a", 2, ValueError("bad"))
        assert caplog.records[-1].getMessage() == "a/2/bad"

    def test_trace_level(self, logger: CoreLogger, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(TRACE):
            logger.trace("fine detail")
        assert caplog.records[-1].levelname == "TRACE"

    def test_disabled_level_emits_nothing(self, caplog: pytest.LogCaptureFixture) -> None:
        quiet = create_logger("test.objprint.quiet", level=logging.ERROR)
        with caplog.at_level(TRACE):
            quiet.info("hidden")
        assert not [r for r in caplog.records if r.name == quiet.name]

    def test_caller_location(self, logger: CoreLogger, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(TRACE):
            logger.error("where")
            logger.log(logging.ERROR, "where")
        assert [r.funcName for r in caplog.records[-2:]] == ["test_caller_location"] * 2

    def test_prefix_with_nests(self, logger: CoreLogger, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(TRACE):
            with logger.prefix_with("[A]"):
                with logger.prefix_with("[B]"):
                    logger.info("inner")
                logger.info("outer")
            logger.info("plain")
        assert [r.getMessage() for r in caplog.records[-3:]] == ["[A] > [B] > inner", "[A] > outer", "plain"]

    def test_extra_keywords(self, logger: CoreLogger, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(TRACE):
            logger.info("with extra", user="bob")
        assert caplog.records[-1].user == "bob"  # type: ignore[attr-defined]

    def test_reserved_keyword_rejected(self, logger: CoreLogger) -> None:
        with pytest.raises(ValueError, match="lineno"):
            logger.warning("bad", lineno=3)

    def test_analysis_mode_silences_logging(self, logger: CoreLogger, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(TRACE):
            with analysis_mode_context():
                logger.error("hidden")
            logger.error("shown")
        assert [r.getMessage() for r in caplog.records if r.name == logger.name] == ["shown"]

    def test_exception_attaches_exc_info(self, logger: CoreLogger, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(TRACE):
            try:
                raise KeyError("k")
            except KeyError:
                logger.exception("failed")
        assert caplog.records[-1].exc_info is not None


class TestInitializeRoot:
    def test_idempotent_single_stderr_handler(self, clean_logging: None) -> None:
        initialize_root()
        initialize_root()
        root = logging.getLogger()
        handlers = [h for h in root.handlers if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr]
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, CoreFormatter)

    def test_level_by_name(self, clean_logging: None) -> None:
        initialize_root(level="debug", force=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_force_keeps_other_handlers(self, clean_logging: None) -> None:
        other = logging.NullHandler()
        logging.getLogger().addHandler(other)
        initialize_root(force=True)
        assert other in logging.getLogger().handlers


class TestCoreFormatter:
    def _record(self) -> logging.LogRecord:
        record = logging.LogRecord("x", logging.WARNING, __file__, 7, "hello %s", ("you",), None, "fn")
        record.created = 0.0
        return record

    def test_format_without_colors(self, no_colors: None) -> None:
        formatter = CoreFormatter("%(levelName)s %(fileAndLine)s %(method)s %(message)s")
        text = formatter.format(self._record())
        assert text.startswith("WARNING ")
        assert ":7 fn() hello you" in text
        assert "\033[" not in text

    def test_time_zone_and_short_time(self, no_colors: None) -> None:
        formatter = CoreFormatter("%(asctime)s", datefmt="%-I:%M%p", tz="UTC")
        assert formatter.format(self._record()) == "12:00am"

    def test_colors_in_desktop_mode(self) -> None:
        in_desktop_mode(override=True)
        try:
            assert get_color_code("WARNING") != ""
            assert get_color_code("#ff0000") == "\033[38;2;255;0;0m"
        finally:
            in_desktop_mode(unset_override=True)
        in_desktop_mode(override=False)
        try:
            assert get_color_code("WARNING") == ""
        finally:
            in_desktop_mode(unset_override=True)


# End of file: src/mstair/objprint/xlogging/test_core_logger.py
