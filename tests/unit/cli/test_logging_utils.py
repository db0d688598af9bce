#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/cli/test_logging_utils.py
"""Unit tests for logging configuration."""

import logging

import pytest

from events2md.logging_utils import configure_logging, resolve_level


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_level_from_name(self, restore_root_logger):
        root = configure_logging("debug")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_log_file(self, temp_dir, restore_root_logger):
        log_file = temp_dir / "events2md.log"
        root = configure_logging(logging.INFO, log_file=str(log_file))
        logging.getLogger("events2md.test").info("hello")
        for handler in root.handlers:
            handler.flush()

        assert len(root.handlers) == 2
        assert "INFO: hello" in log_file.read_text(encoding="utf-8")

    def test_trace_format(self, temp_dir, restore_root_logger):
        log_file = temp_dir / "trace.log"
        root = configure_logging(logging.DEBUG, log_file=str(log_file), trace_mode=True)
        logging.getLogger("events2md.test").debug("traced")
        for handler in root.handlers:
            handler.flush()

        assert "[DEBUG] [events2md.test] traced" in log_file.read_text(encoding="utf-8")

    def test_unwritable_log_file(self, temp_dir, restore_root_logger):
        root = configure_logging(logging.INFO, log_file=str(temp_dir / "missing" / "x.log"))
        assert len(root.handlers) == 1

    def test_unwritable_log_file_warns_on_console(self, temp_dir, restore_root_logger, capsys):
        configure_logging(logging.WARNING, log_file=str(temp_dir / "missing" / "x.log"))
        assert "WARNING: Could not create log file" in capsys.readouterr().err


@pytest.mark.unit
class TestResolveLevel:
    """Tests for resolve_level."""

    @pytest.mark.parametrize("name,expected", [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), (40, 40)])
    def test_known_levels(self, name, expected):
        assert resolve_level(name) == expected

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            resolve_level("verbose")
