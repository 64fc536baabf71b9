# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro

"""Middle-out traversal: start at the centre of the insertion order and fan outwards.

The first element emitted is the one at index ``size // 2``. For an even size
that is the element just right of the centre. The view then alternates between
the next unvisited element on the left and the next one on the right. Once one
side runs out, the remaining side is emitted in order.

    >>> from multiorder.views.middle_out import MiddleOutOrder
    >>> list(MiddleOutOrder([1, 2, 3, 4, 5]))
    [3, 2, 4, 1, 5]
    >>> list(MiddleOutOrder([10, 20, 30, 40]))
    [30, 20, 40, 10]

Unlike the sorted views, middle-out never compares elements. It only rearranges positions.
"""

from collections.abc import Iterable, Iterator
from typing import override

from .kind import ViewKind
from .view import ArrangedView


class MiddleOutOrder[T](ArrangedView[T], kind=ViewKind.MIDDLE_OUT):
    @override
    def _arrangement(self, snapshot: tuple[T, ...]) -> Iterable[T]:
        return _middle_out(snapshot)


def _middle_out[T](values: tuple[T, ...]) -> Iterator[T]:
    if not values:
        return

    middle = len(values) // 2
    yield values[middle]

    left = middle - 1
    right = middle + 1
    while left >= 0 or right < len(values):
        if left >= 0:
            yield values[left]
            left -= 1
        if right < len(values):
            yield values[right]
            right += 1
