# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro

"""Side-cross traversal: alternate between the smallest and largest remaining elements.

The snapshot is sorted ascending, then consumed from both ends towards the
middle: smallest, largest, second smallest, second largest, and so on. With an
odd number of elements the lone middle element is emitted once, last.

    >>> from multiorder.views.side_cross import SideCrossOrder
    >>> list(SideCrossOrder([1, 3, 5, 7, 9]))
    [1, 9, 3, 7, 5]
    >>> list(SideCrossOrder([4, 1, 3, 2]))
    [1, 4, 2, 3]
"""

from collections.abc import Iterable, Iterator
from typing import override

from ..container.capabilities import ordered
from .kind import ViewKind
from .view import ArrangedView


class SideCrossOrder[T](ArrangedView[T], kind=ViewKind.SIDE_CROSS):
    @override
    def _arrangement(self, snapshot: tuple[T, ...]) -> Iterable[T]:
        return _side_cross(ordered(snapshot))


def _side_cross[T](values: list[T]) -> Iterator[T]:
    left = 0
    right = len(values) - 1

    while left < right:
        yield values[left]
        yield values[right]
        left += 1
        right -= 1

    if left == right:
        yield values[left]
