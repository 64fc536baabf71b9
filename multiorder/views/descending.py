# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro

from collections.abc import Iterable
from typing import override

from ..container.capabilities import ordered
from .kind import ViewKind
from .view import ArrangedView


class DescendingOrder[T](ArrangedView[T], kind=ViewKind.DESCENDING):
    """Elements sorted from largest to smallest by ``<``.

    >>> list(DescendingOrder([2, 4, 1, 3]))
    [4, 3, 2, 1]
    """

    @override
    def _arrangement(self, snapshot: tuple[T, ...]) -> Iterable[T]:
        # Stable as well: equal elements keep their insertion order rather than being flipped
        return ordered(snapshot, reverse=True)
