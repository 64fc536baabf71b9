# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro

import logging

from typing import override


class ConditionalFormatter(logging.Formatter):
    # Records logged with extra={"simple": True} skip the prefix
    @override
    def format(self, record: logging.LogRecord) -> str:
        if getattr(record, "simple", False):
            return record.getMessage()
        return super().format(record)
