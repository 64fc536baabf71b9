# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro

from .ascending import AscendingOrder
from .cursor import Cursor
from .descending import DescendingOrder
from .insertion import InsertionOrder
from .kind import ViewKind
from .middle_out import MiddleOutOrder
from .reverse import ReverseOrder
from .side_cross import SideCrossOrder
from .view import ArrangedView, MappedView, TraversalView


__all__ = [
    "ArrangedView",
    "AscendingOrder",
    "Cursor",
    "DescendingOrder",
    "InsertionOrder",
    "MappedView",
    "MiddleOutOrder",
    "ReverseOrder",
    "SideCrossOrder",
    "TraversalView",
    "ViewKind",
]
