"""Tests for setup_logging.

The app installs its console handler when it is imported, and pytest
attaches capture handlers while a test runs, so each test starts from a
root logger with its handlers detached.
"""

import logging

import pytest

from flight_registration_api.app.core.logging_config import (
    CONSOLE_HANDLER_NAME,
    FILE_HANDLER_NAME,
    setup_logging,
)


@pytest.fixture
def bare_root():
    """Give the test a root logger without handlers, restored afterwards."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level

    def detach() -> logging.Logger:
        root.handlers = []
        return root

    yield detach
    for handler in root.handlers:
        if handler not in original_handlers:
            handler.close()
    root.handlers = original_handlers
    root.setLevel(original_level)


def _names(root: logging.Logger) -> list:
    return [h.get_name() for h in root.handlers]


def test_configures_console_handler_and_level(bare_root):
    root = bare_root()

    setup_logging("debug")

    assert root.level == logging.DEBUG
    assert _names(root) == [CONSOLE_HANDLER_NAME]


def test_unknown_level_falls_back_to_info(bare_root):
    root = bare_root()

    setup_logging("chatty")

    assert root.level == logging.INFO


def test_adds_file_handler(bare_root, tmp_path):
    root = bare_root()
    logfile = tmp_path / "api.log"

    setup_logging("INFO", str(logfile))
    logging.getLogger("flight_registration_api").info("hello")
    for handler in root.handlers:
        handler.flush()

    assert _names(root) == [CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME]
    assert "hello" in logfile.read_text(encoding="utf-8")


def test_second_call_is_a_no_op(bare_root):
    root = bare_root()

    setup_logging("INFO")
    setup_logging("DEBUG")

    assert _names(root) == [CONSOLE_HANDLER_NAME]
    assert root.level == logging.INFO


def test_other_handlers_do_not_block_setup(bare_root):
    root = bare_root()
    foreign = logging.NullHandler()
    root.addHandler(foreign)

    setup_logging("WARNING")

    assert _names(root) == [None, CONSOLE_HANDLER_NAME]
    assert root.level == logging.WARNING
