# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro

from __future__ import annotations

from typing import TYPE_CHECKING, Any, override

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text


if TYPE_CHECKING:
    import logging

    from rich.console import ConsoleRenderable


class CustomRichHandler(RichHandler):
    """Rich TTY handler that prefixes each message with ``[L:logger.name]``.

    Time and level columns are folded into the prefix, so a container's debug
    output reads as ``[D:OrderedContainer.AscendingOrder] Arranged 5 element(s)``.
    """

    def __init__(
        self,
        *args: Any,
        show_level: bool = True,
        show_name: bool = True,
        level_width: int = 1,
        level_color_everything: bool = True,
        level_prefix: str = "[",
        level_suffix: str = "] ",
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("console", Console(stderr=True))
        kwargs.setdefault("rich_tracebacks", True)
        kwargs.setdefault("enable_link_path", False)
        super().__init__(*args, show_time=False, show_level=False, **kwargs)

        self.show_prefix_level = show_level
        self.show_prefix_name = show_name
        self.level_width = level_width
        self.level_color_everything = level_color_everything
        self.level_prefix = level_prefix
        self.level_suffix = level_suffix

    def should_format(self, record: logging.LogRecord) -> bool:
        return not getattr(record, "simple", False)

    def get_level(self, record: logging.LogRecord) -> str:
        return record.levelname[0].ljust(self.level_width)

    def get_level_style(self, record: logging.LogRecord) -> str:
        return f"logging.level.{record.levelname.lower()}"

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        text = Text()

        if self.should_format(record) and (self.show_prefix_level or self.show_prefix_name):
            text.append(self.level_prefix, style="dim")
            if self.show_prefix_level:
                text.append(self.get_level(record), style=self.get_level_style(record))
            if self.show_prefix_name:
                text.append(f"{':' if self.show_prefix_level else ''}{record.name}", style="dim")
            text.append(self.level_suffix, style="dim")

        style = self.get_level_style(record) if self.level_color_everything else "log.message"
        text.append(message, style=style)
        return text
