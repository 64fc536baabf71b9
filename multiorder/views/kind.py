# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro

from __future__ import annotations

from enum import Enum
from typing import override


class ViewKind(Enum):
    ORDER = "order"
    REVERSE = "reverse"
    ASCENDING = "ascending"
    DESCENDING = "descending"
    SIDE_CROSS = "side_cross"
    MIDDLE_OUT = "middle_out"

    @classmethod
    @override
    def _missing_(cls, value: object) -> ViewKind | None:
        # Accept 'Side-Cross', 'SIDE_CROSS', 'middle out', etc.
        if isinstance(value, str):
            normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
            for member in cls:
                if member.value == normalized:
                    return member
        return None

    @override
    def __str__(self) -> str:
        return self.value
