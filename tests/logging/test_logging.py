"""Tests for centralized logging behavior and configuration."""

import logging
from io import StringIO

import pytest

from astarpath import PathFinder
from astarpath.logging import (
    ROOT_LOGGER_NAME,
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)
from astarpath.maps import GridMap


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Reset logging state before and after each test to avoid cross-test bleed."""
    reset_logging()
    yield
    reset_logging()


def _capture_root() -> StringIO:
    capture = StringIO()
    handler = logging.StreamHandler(capture)
    setup_root_logger(
        level=logging.INFO, format_string="%(levelname)s %(message)s", handler=handler
    )
    return capture


def test_effective_levels_enable_disable():
    """INFO by default, DEBUG after enable, back to INFO after disable."""
    logger = get_logger("astarpath.test")

    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    logger.info("info-1")
    assert "info-1" in capture.getvalue()

    capture.seek(0)
    capture.truncate(0)
    logger.debug("debug-1")
    assert "debug-1" not in capture.getvalue()

    enable_debug_logging()
    logger.debug("debug-2")
    assert "debug-2" in capture.getvalue()

    capture.seek(0)
    capture.truncate(0)
    disable_debug_logging()
    logger.debug("debug-3")
    assert "debug-3" not in capture.getvalue()

    logger.handlers.clear()


def test_global_level_propagates_to_children_and_new_loggers():
    logger1 = get_logger("astarpath.module1")
    logger2 = get_logger("astarpath.module2")

    assert logger1.getEffectiveLevel() == logging.INFO
    assert logger2.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert logger2.getEffectiveLevel() == logging.WARNING

    logger3 = get_logger("astarpath.module3")
    assert logger3.getEffectiveLevel() == logging.WARNING


def test_setup_root_logger_idempotent_no_duplicate_handlers():
    capture = StringIO()
    setup_root_logger(level=logging.INFO, handler=logging.StreamHandler(capture))

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    assert len(root_logger.handlers) == 1

    setup_root_logger(level=logging.DEBUG)
    assert len(root_logger.handlers) == 1
    assert root_logger.level == logging.INFO

    set_global_log_level(logging.ERROR)
    assert root_logger.level == logging.ERROR


def test_custom_format_string_applied():
    capture = StringIO()
    handler = logging.StreamHandler(capture)
    fmt = "LEVEL:%(levelname)s|NAME:%(name)s|MSG:%(message)s"
    setup_root_logger(level=logging.INFO, format_string=fmt, handler=handler)

    logger = get_logger("astarpath.test.format")
    logger.info("hello")
    out = capture.getvalue()
    assert "LEVEL:INFO" in out
    assert "NAME:astarpath.test.format" in out
    assert "MSG:hello" in out


def test_search_is_silent_at_info_and_chatty_at_debug():
    capture = _capture_root()
    finder = PathFinder(GridMap(3, 3))

    finder.find_path((0, 0), (2, 2))
    assert capture.getvalue() == ""

    enable_debug_logging()
    finder.find_path((0, 0), (2, 2))
    out = capture.getvalue()
    assert "DEBUG Searching path from (0, 0) to (2, 2)" in out
    assert "3 nodes" in out


def test_missing_endpoint_is_logged_at_debug():
    capture = _capture_root()
    enable_debug_logging()

    with pytest.raises(KeyError):
        PathFinder(GridMap(3, 3)).find_path((0, 0), (5, 5))
    assert "Destination node (5, 5) not found" in capture.getvalue()


def test_reset_logging_clears_handlers():
    _capture_root()
    reset_logging()
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    assert root_logger.handlers == []
    assert root_logger.level == logging.NOTSET
