# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro

"""Process-wide logging setup for multiorder.

Configures the root logger level, an optional log file, a TTY handler and
per-logger levels selected by regular expressions on the logger name.
"""

from __future__ import annotations

import logging
import re
import sys

from typing import TYPE_CHECKING, Any, ClassVar, Self
from typing import cast as typing_cast

from ..helpers import script_info
from .config import LoggingConfig
from .filters import HandlerFilter
from .formatters import ConditionalFormatter


if TYPE_CHECKING:
    from .levels import LoggingLevel


######
# MARK: Constants

# Log file name
LOG_FILE_NAME: str = f"{script_info.get_script_name()}.log"


######
# MARK: Logging Manager
class LoggingManager:
    _instance: ClassVar[LoggingManager | None] = None

    initialized: bool
    fh: logging.Handler | None = None
    ch: logging.Handler | None = None

    def __new__(cls, *args: Any, **kwargs: Any) -> Self:
        if (instance := cls._instance) is None:
            instance = cls._instance = super().__new__(cls, *args, **kwargs)
            instance.initialized = False
        return typing_cast("Self", instance)

    def initialize(self, config: LoggingConfig | dict[str, Any]) -> None:
        if not isinstance(config, LoggingConfig):
            config = LoggingConfig.model_validate(config)

        if self.initialized:
            msg = f"Must not initialise {type(self).__name__} twice"
            raise RuntimeError(msg)
        self.initialized = True

        self.config = config
        self.log_file_path = config.dir / LOG_FILE_NAME

        self._configure_root_logger()
        self._configure_file_handler()
        self._configure_tty_handler()
        self._configure_custom_logger_levels()

    def _configure_root_logger(self) -> None:
        logging.captureWarnings(capture=True)
        logging.root.setLevel(self.config.levels.root.value)

    def _configure_file_handler(self) -> None:
        self.fh = None
        if not self.config.levels.file.enabled:
            return

        self.fh = logging.FileHandler(self.log_file_path, mode="w")
        self.fh.setLevel(self.config.levels.file.value)
        self.fh.setFormatter(ConditionalFormatter("%(asctime)s [%(levelname)s:%(name)s] %(message)s"))
        self.fh.addFilter(HandlerFilter("file"))
        logging.root.addHandler(self.fh)

    def _configure_tty_handler(self) -> None:
        self.ch = None
        if not self.config.levels.tty.enabled:
            return

        if self.config.rich:
            from .rich_handler import CustomRichHandler

            self.ch = CustomRichHandler()
        else:
            self.ch = logging.StreamHandler(sys.stderr)
            self.ch.setFormatter(ConditionalFormatter("[%(levelname).1s:%(name)s] %(message)s"))

        self.ch.setLevel(self.config.levels.tty.value)
        self.ch.addFilter(HandlerFilter("tty"))

        # pytest captures logging on its own
        if not script_info.is_unit_test():
            logging.root.addHandler(self.ch)

    def apply_logging_level(self, logger: logging.Logger) -> None:
        # Explicit levels win
        if logger.level != logging.NOTSET:
            return

        # The longest matching custom pattern wins, otherwise the default applies
        level: LoggingLevel = self.config.levels.default
        pattern_len = 0

        for pattern, custom_level in self.config.levels.custom.items():
            assert isinstance(pattern, re.Pattern), f"Custom logging levels keys must be compiled regex patterns, got {type(pattern)}"
            if (match := pattern.match(logger.name)) is not None and pattern_len < len(match.group(0)):
                level = custom_level
                pattern_len = len(match.group(0))

        if level == logging.NOTSET:
            return

        logger.setLevel(level.value)

    def _configure_custom_logger_levels(self) -> None:
        for logger in list(logging.root.manager.loggerDict.values()):
            if isinstance(logger, logging.Logger):
                self.apply_logging_level(logger)

    def reset(self) -> None:
        """Detach the configured handlers so that :meth:`initialize` can be called again."""
        for handler in (self.fh, self.ch):
            if handler is not None:
                logging.root.removeHandler(handler)
                handler.close()
        self.fh = None
        self.ch = None
        self.initialized = False
