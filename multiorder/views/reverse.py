# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro

from typing import override

from .kind import ViewKind
from .view import MappedView


class ReverseOrder[T](MappedView[T], kind=ViewKind.REVERSE):
    """Elements from the most recently added back to the first one.

    >>> list(ReverseOrder([10, 20, 30]))
    [30, 20, 10]
    """

    @override
    def _index_of(self, position: int) -> int:
        return len(self._snapshot) - 1 - position
