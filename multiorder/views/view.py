# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro

"""Base classes shared by the traversal views.

A view captures ``tuple(source)`` when it is constructed and never looks at
its source again. :class:`ArrangedView` subclasses reorder the snapshot into a
precomputed tuple. :class:`MappedView` subclasses keep the snapshot as-is and
translate cursor positions into snapshot indices.
"""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from collections.abc import Iterable, Sequence
from typing import Any, ClassVar, overload, override

from ..container.capabilities import check_element
from ..container.errors import OutOfRangeError
from ..container.rendering import render
from ..util.mixins import LoggableMixin
from .cursor import Cursor
from .kind import ViewKind


class TraversalView[T](LoggableMixin, Sequence[T], metaclass=ABCMeta):
    kind: ClassVar[ViewKind]

    _registry: ClassVar[dict[ViewKind, type[TraversalView[Any]]]] = {}

    def __init_subclass__(cls, *, kind: ViewKind | str | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if kind is not None:
            cls.kind = ViewKind(kind)
            TraversalView._registry[cls.kind] = cls

    @classmethod
    def for_kind(cls, kind: ViewKind | str) -> type[TraversalView[Any]]:
        kind = ViewKind(kind)
        if (klass := TraversalView._registry.get(kind)) is None:
            msg = f"No view registered for {kind!r}"
            raise LookupError(msg)
        return klass

    def __init__(self, source: Iterable[T] = (), /, *, parent: object | None = None) -> None:
        self.log_parent = parent

        snapshot = tuple(source)
        for value in snapshot:
            check_element(value)
        self._snapshot: tuple[T, ...] = snapshot

        self._arrange()
        self.log.debug("Arranged %d element(s)", len(snapshot))

    def _arrange(self) -> None:  # noqa: B027 as most views have nothing to precompute
        pass

    @abstractmethod
    def _element_at(self, position: int) -> T:
        msg = "Subclasses must implement _element_at method."
        raise NotImplementedError(msg)

    # MARK: Cursors
    def begin(self) -> Cursor[T]:
        return Cursor(self, 0)

    def end(self) -> Cursor[T]:
        return Cursor(self, len(self))

    def as_tuple(self) -> tuple[T, ...]:
        return tuple(self._element_at(position) for position in range(len(self)))

    # MARK: Sequence ABC
    @override
    def __len__(self) -> int:
        return len(self._snapshot)

    @override
    def __iter__(self) -> Cursor[T]:
        return self.begin()

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...
    @override
    def __getitem__(self, index: int | slice) -> T | tuple[T, ...]:
        if isinstance(index, slice):
            return tuple(self._element_at(position) for position in range(*index.indices(len(self))))

        position = index + len(self) if index < 0 else index
        if not 0 <= position < len(self):
            msg = f"{type(self).__name__} index {index} out of range for {len(self)} element(s)"
            raise OutOfRangeError(msg)
        return self._element_at(position)

    # MARK: Comparison
    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TraversalView):
            return NotImplemented
        return type(self) is type(other) and len(self) == len(other) and self.as_tuple() == other.as_tuple()

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    # MARK: Printing
    @override
    def __str__(self) -> str:
        return render(self)

    @override
    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {list(self)!r}>"


class ArrangedView[T](TraversalView[T], metaclass=ABCMeta):
    """View whose traversal order is a reordered copy of the snapshot, computed once."""

    @override
    def _arrange(self) -> None:
        self._arranged: tuple[T, ...] = tuple(self._arrangement(self._snapshot))

    @abstractmethod
    def _arrangement(self, snapshot: tuple[T, ...]) -> Iterable[T]:
        msg = "Subclasses must implement _arrangement method."
        raise NotImplementedError(msg)

    @override
    def _element_at(self, position: int) -> T:
        return self._arranged[position]

    @override
    def as_tuple(self) -> tuple[T, ...]:
        return self._arranged


class MappedView[T](TraversalView[T], metaclass=ABCMeta):
    """View that walks the snapshot in place through a position to index mapping."""

    @abstractmethod
    def _index_of(self, position: int) -> int:
        msg = "Subclasses must implement _index_of method."
        raise NotImplementedError(msg)

    @override
    def _element_at(self, position: int) -> T:
        return self._snapshot[self._index_of(position)]

    @override
    def as_tuple(self) -> tuple[T, ...]:
        if (sequence := self.__dict__.get("_sequence")) is None:
            sequence = self.__dict__["_sequence"] = super().as_tuple()
        return sequence
