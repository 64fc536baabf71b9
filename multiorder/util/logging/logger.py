# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro

"""Logger class and factory used throughout multiorder.

Loggers are nested by passing a ``parent``. This can be a :class:`logging.Logger`
or any object with a ``log`` attribute, which is how a view ends up logging as
``OrderedContainer.AscendingOrder``:

    >>> from multiorder.util.logging import getLogger
    >>> parent = getLogger("OrderedContainer")
    >>> getLogger("AscendingOrder", parent=parent).name
    'OrderedContainer.AscendingOrder'
"""

import functools
import logging

from typing import Any, override

from .loggable_protocol import LoggableProtocol


# Handler name accepted by Logger.isEnabledFor -> LoggingManager attribute holding that handler
HANDLER_ATTRIBUTES: dict[str, str] = {
    "tty": "ch",
    "file": "fh",
}


class Logger(logging.Logger):
    @override
    def isEnabledFor(self, level: int, *, handler: str | None = None) -> bool:
        if handler is None:
            return super().isEnabledFor(level)

        if handler not in HANDLER_ATTRIBUTES:
            msg = f"Unknown handler: {handler}. Expected one of {', '.join(HANDLER_ATTRIBUTES)}."
            raise ValueError(msg)
        return self._isEnabledForHandler(HANDLER_ATTRIBUTES[handler], level)

    def isEnabledForTty(self, level: int) -> bool:  # noqa: N802 which matches isEnabledFor
        return self._isEnabledForHandler("ch", level)

    def isEnabledForFile(self, level: int) -> bool:  # noqa: N802 which matches isEnabledFor
        return self._isEnabledForHandler("fh", level)

    def _isEnabledForHandler(self, attribute: str, level: int) -> bool:  # noqa: N802
        from .manager import LoggingManager

        handler: logging.Handler | None = getattr(LoggingManager(), attribute)
        if handler is None or handler.level > level:
            return False
        return super().isEnabledFor(level)


logging.setLoggerClass(Logger)


original_logging_getLogger = logging.getLogger  # noqa: N816


def _resolve_name(obj: object) -> str:
    if isinstance(obj, str):
        return obj

    # Loggable objects may customise their logger name
    name = getattr(obj, "__log_name__", None)
    return name if isinstance(name, str) else type(obj).__name__


def _getLogger(obj: object, parent: Any = None, name: str | None = None) -> logging.Logger:  # noqa: N802
    if name is None:
        name = _resolve_name(obj)

    if isinstance(parent, logging.Logger):
        logger = parent.getChild(name)
    elif isinstance(parent, LoggableProtocol):
        logger = parent.log.getChild(name)
    else:
        logger = original_logging_getLogger(name)

    from .manager import LoggingManager

    manager = LoggingManager()
    if manager.initialized:
        manager.apply_logging_level(logger)

    return logger


def getLogger(obj: object, parent: Any = None, name: str | None = None) -> Logger:  # noqa: N802
    logger = _getLogger(obj, parent=parent, name=name)

    if not isinstance(logger, Logger):
        msg = f"Expected a Logger instance, got: {type(logger)}"
        raise TypeError(msg)

    return logger


# Loggers created through the stdlib entry point still get the configured levels applied
@functools.wraps(logging.getLogger)
def logging_getLogger_wrapper(name: str | None = None) -> logging.Logger:  # noqa: N802
    if name is None:
        return logging.root
    return _getLogger(name)


logging.getLogger = logging_getLogger_wrapper
