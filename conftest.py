# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro

# Shared pytest fixtures, plus collection of the doctest examples embedded in module docstrings.
from __future__ import annotations

from doctest import ELLIPSIS, IGNORE_EXCEPTION_DETAIL
from typing import TYPE_CHECKING

import pytest

from sybil import Sybil
from sybil.parsers.rest import DocTestParser, PythonCodeBlockParser


if TYPE_CHECKING:
    from multiorder.util.logging.manager import LoggingManager


# Automatically provide a logging manager for all tests
@pytest.fixture(autouse=True, scope="session")
def logging_manager() -> LoggingManager:
    from multiorder.util.logging.manager import LoggingManager

    manager = LoggingManager()
    if not manager.initialized:
        manager.initialize(
            {
                "levels": {
                    "file": "OFF",
                    "tty": "NOTSET",
                    "default": "NOTSET",
                },
                "rich": False,
            }
        )
    return manager


pytest_collect_file = Sybil(
    parsers=[
        DocTestParser(optionflags=ELLIPSIS | IGNORE_EXCEPTION_DETAIL),
        PythonCodeBlockParser(),
    ],
    patterns=["*.rst", "*.py"],
    excludes=["conftest.py", "test_*.py"],
).pytest()
