"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from git_trivia.logging_config import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_logger():
    logger = logging.getLogger("git_trivia")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


class TestSetupLogging:
    """Test setup_logging."""

    @pytest.mark.parametrize(
        "verbosity, level",
        [("quiet", logging.ERROR), ("normal", logging.WARNING), ("verbose", logging.DEBUG)],
    )
    def test_level_follows_verbosity(self, verbosity, level):
        assert setup_logging(verbosity).level == level

    def test_single_rich_handler_after_repeated_calls(self):
        setup_logging("normal")
        logger = setup_logging("verbose")

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)

    def test_root_logger_untouched(self):
        root_handlers = list(logging.getLogger().handlers)

        logger = setup_logging("verbose")

        assert logger.propagate is False
        assert logging.getLogger().handlers == root_handlers

    def test_records_go_to_stderr(self, capsys):
        setup_logging("normal")

        get_logger("git_trivia.backend").warning("something odd")

        captured = capsys.readouterr()
        assert "something odd" in captured.err
        assert captured.out == ""


class TestGetLogger:
    """Test get_logger naming."""

    def test_module_names_kept(self):
        assert get_logger("git_trivia.ownership").name == "git_trivia.ownership"

    def test_foreign_names_prefixed(self):
        assert get_logger("helpers").name == "git_trivia.helpers"

    def test_default_is_package_logger(self):
        assert get_logger().name == "git_trivia"
