"""
Tests for logging setup.
"""

from __future__ import annotations

import logging

import pytest

from peritus.utils.logging import logging_config
from peritus.utils.logging.logging_config import NOISY_LIBRARIES, setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler, (logging.FileHandler, logging_config.NullHandler)):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_log_file_receives_records(tmp_path) -> None:
    """Verify records reach the configured file."""
    log_file = tmp_path / "logs" / "peritus.log"

    setup_logging("INFO", log_file)
    logging.getLogger("peritus.test").info("expert added")
    for handler in logging.getLogger().handlers:
        handler.flush()

    content = log_file.read_text()
    assert "expert added" in content
    assert "| INFO | peritus.test |" in content


def test_without_file_records_are_discarded() -> None:
    """Verify nothing is attached to the terminal when no file is set."""
    setup_logging("DEBUG")

    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging_config.NullHandler)


def test_repeated_setup_replaces_handlers(tmp_path) -> None:
    """Verify calling setup twice does not duplicate handlers."""
    setup_logging("INFO", tmp_path / "a.log")
    setup_logging("INFO", tmp_path / "b.log")

    assert len(logging.getLogger().handlers) == 1


def test_unknown_level_falls_back_to_warning() -> None:
    """Verify a bogus level name does not break startup."""
    setup_logging("chatty")
    assert logging.getLogger().level == logging.WARNING


def test_noisy_libraries_stay_quiet() -> None:
    """Verify third-party loggers are held at WARNING or above."""
    setup_logging("DEBUG")
    for name in NOISY_LIBRARIES:
        assert logging.getLogger(name).level >= logging.WARNING
