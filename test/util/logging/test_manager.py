# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro

import logging

import pytest

from multiorder.util.logging import Logger, getLogger
from multiorder.util.logging.config import LoggingConfig
from multiorder.util.logging.manager import LOG_FILE_NAME, LoggingManager
from multiorder.util.logging.rich_handler import CustomRichHandler


@pytest.fixture
def reinitialize(logging_manager):
    previous = logging_manager.config

    def _reinitialize(config: dict) -> LoggingManager:
        logging_manager.reset()
        logging_manager.initialize(config)
        return logging_manager

    yield _reinitialize

    logging_manager.reset()
    logging_manager.initialize(previous)


@pytest.mark.logging
@pytest.mark.logging_manager
class TestLoggingManager:
    def test_singleton(self, logging_manager):
        assert LoggingManager() is logging_manager
        assert logging_manager.initialized

    def test_initialize_twice(self, logging_manager):
        with pytest.raises(RuntimeError):
            logging_manager.initialize({"rich": False})

    def test_longest_custom_match_wins(self, logging_manager, monkeypatch):
        config = LoggingConfig.model_validate(
            {
                "levels": {
                    "default": "WARNING",
                    "custom": {
                        "OrderedContainer": "INFO",
                        r"OrderedContainer\.Ascending": "DEBUG",
                    },
                },
                "rich": False,
            }
        )
        monkeypatch.setattr(logging_manager, "config", config)

        ascending = Logger("OrderedContainer.AscendingOrder")
        reverse = Logger("OrderedContainer.ReverseOrder")
        other = Logger("SomethingElse")
        for logger in (ascending, reverse, other):
            logging_manager.apply_logging_level(logger)

        assert ascending.level == logging.DEBUG
        assert reverse.level == logging.INFO
        assert other.level == logging.WARNING

    def test_explicit_level_is_kept(self, logging_manager, monkeypatch):
        monkeypatch.setattr(logging_manager, "config", LoggingConfig.model_validate({"levels": {"default": "WARNING"}}))

        logger = Logger("Explicit")
        logger.setLevel(logging.ERROR)
        logging_manager.apply_logging_level(logger)
        assert logger.level == logging.ERROR

    def test_notset_default_leaves_level_alone(self, logging_manager):
        logger = Logger("Untouched")
        logging_manager.apply_logging_level(logger)
        assert logger.level == logging.NOTSET

    def test_file_handler(self, reinitialize, tmp_path):
        manager = reinitialize({"dir": tmp_path, "levels": {"file": "DEBUG", "tty": "OFF", "default": "NOTSET"}, "rich": False})
        assert manager.fh is not None
        assert manager.ch is None

        logger = getLogger("fileLogger")
        assert logger.isEnabledForFile(logging.DEBUG)
        assert not logger.isEnabledForTty(logging.ERROR)

        logger.debug("written to file")
        logger.info("tty only", extra={"handler": "tty"})
        manager.fh.flush()

        content = (tmp_path / LOG_FILE_NAME).read_text()
        assert "[DEBUG:fileLogger] written to file" in content
        assert "tty only" not in content

    def test_rich_tty_handler(self, reinitialize, tmp_path):
        manager = reinitialize({"dir": tmp_path, "levels": {"tty": "DEBUG"}, "rich": True})
        assert isinstance(manager.ch, CustomRichHandler)
        assert manager.ch.level == logging.DEBUG
        assert manager.fh is None

    def test_custom_levels_applied_to_new_loggers(self, reinitialize, tmp_path):
        reinitialize({"dir": tmp_path, "levels": {"default": "NOTSET", "custom": {"^quiet": "ERROR"}}, "rich": False})
        assert getLogger("quietLogger").level == logging.ERROR
        assert getLogger("chattyLogger").level == logging.NOTSET


@pytest.mark.logging
class TestCustomRichHandler:
    def test_prefix(self):
        handler = CustomRichHandler()
        record = logging.LogRecord("OrderedContainer", logging.DEBUG, __file__, 1, "Added %r", (1,), None)
        assert handler.render_message(record, record.getMessage()).plain == "[D:OrderedContainer] Added 1"

    def test_simple_records_skip_prefix(self):
        handler = CustomRichHandler(show_level=False)
        record = logging.LogRecord("OrderedContainer", logging.INFO, __file__, 1, "plain", (), None)
        assert handler.render_message(record, "plain").plain == "[OrderedContainer] plain"

        record.simple = True
        assert handler.render_message(record, "plain").plain == "plain"
