# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Self, override

from ..container.errors import OutOfRangeError


if TYPE_CHECKING:
    from .view import TraversalView


class Cursor[T](Iterator[T]):
    """A forward-only position inside a :class:`TraversalView`.

    Cursors peek with :meth:`current`, move with :meth:`advance` and compare
    equal when they sit at the same position of equal views. They are also
    plain Python iterators, so ``for x in view`` drives a fresh cursor from
    :meth:`TraversalView.begin` to :meth:`TraversalView.end`.
    """

    __slots__ = ("_position", "_view")

    def __init__(self, view: TraversalView[T], position: int = 0) -> None:
        if not 0 <= position <= len(view):
            msg = f"Cursor position {position} outside of [0, {len(view)}] for {type(view).__name__}"
            raise OutOfRangeError(msg)

        self._view = view
        self._position = position

    @property
    def view(self) -> TraversalView[T]:
        return self._view

    @property
    def position(self) -> int:
        return self._position

    @property
    def at_begin(self) -> bool:
        return self._position == 0

    @property
    def at_end(self) -> bool:
        return self._position >= len(self._view)

    def current(self) -> T:
        if self.at_end:
            msg = f"{type(self._view).__name__} cursor out of range at position {self._position}"
            raise OutOfRangeError(msg)
        return self._view._element_at(self._position)  # noqa: SLF001 as cursors are the view's accessors

    def advance(self) -> Self:
        if not self.at_end:
            self._position += 1
        return self

    def copy(self) -> Cursor[T]:
        return type(self)(self._view, self._position)

    __copy__ = copy

    # MARK: Iterator ABC
    @override
    def __next__(self) -> T:
        if self.at_end:
            raise StopIteration
        value = self.current()
        self._position += 1
        return value

    @override
    def __iter__(self) -> Self:
        return self

    def __length_hint__(self) -> int:
        return len(self._view) - self._position

    # MARK: Comparison
    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        if self._position != other._position:
            return False
        return self._view is other._view or self._view == other._view

    __hash__ = None  # pyright: ignore[reportAssignmentType] as cursors are mutable

    @override
    def __repr__(self) -> str:
        return f"<Cursor {type(self._view).__name__}@{self._position}/{len(self._view)}>"
