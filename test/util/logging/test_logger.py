# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro

import logging

import pytest

from multiorder.util.logging import Logger, getLogger
from multiorder.util.logging.filters import HandlerFilter
from multiorder.util.logging.formatters import ConditionalFormatter


def make_record(msg: str = "message", **extra) -> logging.LogRecord:
    record = logging.LogRecord("OrderedContainer", logging.INFO, __file__, 1, msg, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.mark.logging
class TestLogger:
    def test_getLogger_returns_logger(self, caplog):
        logger = getLogger("testLogger")
        assert isinstance(logger, Logger)
        with caplog.at_level(logging.INFO):
            logger.debug("debug message")
            logger.info("info message")
            logger.warning("warning message")
        assert "debug message" not in caplog.text
        assert "info message" in caplog.text
        assert "warning message" in caplog.text

    def test_getLogger_with_parent(self, caplog):
        parent = getLogger("parentLogger")
        child = getLogger("childLogger", parent=parent)
        assert child.parent is parent
        assert child.name == "parentLogger.childLogger"
        with caplog.at_level(logging.INFO):
            child.info("child info")
        assert "child info" in caplog.text

    def test_getLogger_from_object(self):
        class Widget:
            pass

        assert getLogger(Widget()).name == "Widget"
        assert getLogger(Widget(), name="custom").name == "custom"

    def test_non_loggable_parent_is_ignored(self):
        assert getLogger("orphanLogger", parent=object()).name == "orphanLogger"

    def test_stdlib_getLogger_uses_logger_class(self):
        assert isinstance(logging.getLogger("stdlibLogger"), Logger)
        assert logging.getLogger() is logging.root

    def test_logger_isEnabledFor(self):
        logger = getLogger("enabledLogger")
        assert logger.isEnabledFor(logging.INFO)
        assert not logger.isEnabledFor(logging.NOTSET)
        assert logger.isEnabledForTty(logging.INFO)
        assert logger.isEnabledFor(logging.INFO, handler="tty")
        assert not logger.isEnabledForFile(logging.INFO)
        assert not logger.isEnabledFor(logging.INFO, handler="file")

    def test_logger_invalid_handler(self):
        logger = getLogger("invalidHandlerLogger")
        with pytest.raises(ValueError):
            logger.isEnabledFor(logging.INFO, handler="invalid")


@pytest.mark.logging
class TestLoggingHelpers:
    def test_handler_filter(self):
        tty = HandlerFilter("tty")
        assert tty.filter(make_record())
        assert tty.filter(make_record(handler="tty"))
        assert not tty.filter(make_record(handler="file"))

    def test_conditional_formatter(self):
        formatter = ConditionalFormatter("[%(levelname).1s:%(name)s] %(message)s")
        assert formatter.format(make_record("Added 1")) == "[I:OrderedContainer] Added 1"
        assert formatter.format(make_record("Added 1", simple=True)) == "Added 1"
