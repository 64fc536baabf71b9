# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro

from typing import override

from .kind import ViewKind
from .view import MappedView


class InsertionOrder[T](MappedView[T], kind=ViewKind.ORDER):
    """Elements in the order they were added.

    >>> list(InsertionOrder([10, 20, 30]))
    [10, 20, 30]
    """

    @override
    def _index_of(self, position: int) -> int:
        return position
