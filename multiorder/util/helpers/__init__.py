# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro

from . import script_info
from .frozendict import FrozenDict


__all__ = [
    "FrozenDict",
    "script_info",
]
