"""Tests for structlog setup."""

import logging

import pytest
import structlog

from stockcast.logging import NOISY_LOGGERS, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    noisy = {name: logging.getLogger(name).level for name in NOISY_LOGGERS}
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, noisy_level in noisy.items():
        logging.getLogger(name).setLevel(noisy_level)
    structlog.reset_defaults()


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_sets_root_level_and_single_handler(self) -> None:
        """The root logger gets exactly one stream handler at the given level."""
        setup_logging("DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_unknown_level_falls_back_to_info(self) -> None:
        """A misspelt level name does not raise."""
        setup_logging("chatty")
        assert logging.getLogger().level == logging.INFO

    def test_noisy_libraries_held_at_warning(self) -> None:
        """DEBUG for the app leaves library loggers at WARNING."""
        setup_logging("DEBUG")
        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_json_format_renders_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        """The json format writes the event name as a JSON field."""
        setup_logging("INFO", "json")
        get_logger("stockcast.test").info("quote_loaded", symbol="AAPL")
        err = capsys.readouterr().err
        assert '"event": "quote_loaded"' in err
        assert '"symbol": "AAPL"' in err
