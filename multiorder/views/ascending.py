# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro

from collections.abc import Iterable
from typing import override

from ..container.capabilities import ordered
from .kind import ViewKind
from .view import ArrangedView


class AscendingOrder[T](ArrangedView[T], kind=ViewKind.ASCENDING):
    """Elements sorted from smallest to largest by ``<``.

    The sort is stable, so equal elements keep their insertion order.

    >>> list(AscendingOrder([7, 3, 9, 1, 5]))
    [1, 3, 5, 7, 9]
    """

    @override
    def _arrangement(self, snapshot: tuple[T, ...]) -> Iterable[T]:
        return ordered(snapshot)
