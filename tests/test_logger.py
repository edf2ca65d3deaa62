"""Tests for logging utilities."""

import logging

from password_toolkit.utils import logger as logger_module
from password_toolkit.utils.logger import LOGGER_NAME, Logger, get_logger


class TestLogger:
    """Tests for the Logger wrapper and module helpers."""

    def test_writes_to_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "toolkit.log"
        log = Logger(name="password_toolkit.test_file", log_file=str(log_file), console=False).get_logger()

        log.info("hello from the test")

        assert "hello from the test" in log_file.read_text(encoding="utf-8")
        assert " - password_toolkit.test_file - INFO - " in log_file.read_text(encoding="utf-8")

    def test_reconfiguring_replaces_handlers(self, tmp_path):
        name = "password_toolkit.test_replace"
        Logger(name=name, log_file=str(tmp_path / "a.log"), console=True)
        log = Logger(name=name, console=False).get_logger()

        assert len(log.handlers) == 1
        assert isinstance(log.handlers[0], logging.NullHandler)
        assert log.propagate is False

    def test_level_filters_messages(self, tmp_path):
        log_file = tmp_path / "level.log"
        log = Logger(name="password_toolkit.test_level", log_file=str(log_file),
                     level=logging.WARNING, console=False).get_logger()

        log.info("quiet")
        log.warning("loud")

        content = log_file.read_text(encoding="utf-8")
        assert "quiet" not in content
        assert "loud" in content

    def test_module_helpers_use_default_logger(self, tmp_path):
        log_file = tmp_path / "default.log"
        Logger(log_file=str(log_file), level=logging.DEBUG, console=False)

        logger_module.debug("d-msg")
        logger_module.info("i-msg")
        logger_module.warning("w-msg")
        logger_module.error("e-msg")
        logger_module.critical("c-msg")

        content = log_file.read_text(encoding="utf-8")
        for level, msg in [("DEBUG", "d-msg"), ("INFO", "i-msg"), ("WARNING", "w-msg"),
                           ("ERROR", "e-msg"), ("CRITICAL", "c-msg")]:
            assert f"{level} - {msg}" in content

    def test_get_logger_returns_child(self):
        assert get_logger("cracker").name == f"{LOGGER_NAME}.cracker"
