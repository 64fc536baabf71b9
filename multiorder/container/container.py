# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro

"""The ordered, duplicate-permitting backing store.

    >>> from multiorder import OrderedContainer
    >>> c = OrderedContainer[int]([7, 15, 6, 1, 2])
    >>> str(c)
    '{7, 15, 6, 1, 2}'
    >>> list(c.ascending_order())
    [1, 2, 6, 7, 15]
    >>> list(c.middle_out_order())
    [6, 15, 1, 7, 2]
    >>> c.remove(15)
    >>> c.size()
    4
"""

from __future__ import annotations

import functools
import types
import typing

from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Any, Self, overload, override
from typing import cast as typing_cast

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from ..util.mixins import LoggableMixin
from .capabilities import ComparableProtocol, check_element, check_element_type
from .errors import CapabilityError, ElementNotFoundError, OutOfRangeError
from .rendering import render


if TYPE_CHECKING:
    from ..views import (
        AscendingOrder,
        DescendingOrder,
        InsertionOrder,
        MiddleOutOrder,
        ReverseOrder,
        SideCrossOrder,
        TraversalView,
        ViewKind,
    )


class OrderedContainer[T: ComparableProtocol](LoggableMixin, Sequence[T]):
    def __init__(self, data: Iterable[T] | None = None, /) -> None:
        self._data: list[T] = []
        if data is not None:
            for value in data:
                self.add(value)

    def __class_getitem__(cls, params: Any) -> Any:
        args = params if isinstance(params, tuple) else (params,)
        if len(args) != 1:
            msg = f"{cls.__name__} takes exactly one element type, got {len(args)}"
            raise TypeError(msg)
        check_element_type(args[0])
        return super().__class_getitem__(params)  # pyright: ignore[reportAttributeAccessIssue]

    @classmethod
    def get_element_type(cls, source: Any = None) -> Any:
        """Return the element type this container was specialised with, or :data:`typing.Any`."""
        element_type = _resolve_element_type(source if source is not None else cls)
        return typing.Any if isinstance(element_type, typing.TypeVar) else element_type

    # MARK: Mutation
    def add(self, value: T) -> None:
        self._data.append(check_element(value))
        self.log.debug("Added %r, size is now %d", value, len(self._data))

    def remove(self, value: T) -> None:
        kept = [item for item in self._data if not item == value]
        removed = len(self._data) - len(kept)
        if removed == 0:
            msg = f"Element not found: {value!r}"
            raise ElementNotFoundError(msg)

        self._data[:] = kept
        self.log.debug("Removed %d slot(s) equal to %r, size is now %d", removed, value, len(self._data))

    def __setitem__(self, index: int, value: T) -> None:
        position = self._checked_position(index, allow_negative=True)
        self._data[position] = check_element(value)
        self.log.debug("Replaced slot %d with %r", position, value)

    # MARK: Access
    def size(self) -> int:
        return len(self._data)

    def at(self, index: int) -> T:
        return self._data[self._checked_position(index)]

    @property
    def data(self) -> tuple[T, ...]:
        return tuple(self._data)

    def _checked_position(self, index: int, *, allow_negative: bool = False) -> int:
        position = index + len(self._data) if allow_negative and index < 0 else index
        if not 0 <= position < len(self._data):
            msg = f"Index {index} out of bounds for {type(self).__name__} of size {len(self._data)}"
            raise OutOfRangeError(msg)
        return position

    # MARK: Sequence ABC
    @override
    def __len__(self) -> int:
        return len(self._data)

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...
    @override
    def __getitem__(self, index: int | slice) -> T | tuple[T, ...]:
        if isinstance(index, slice):
            return tuple(self._data[index])
        return self._data[self._checked_position(index, allow_negative=True)]

    @override
    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    @override
    def __contains__(self, value: object) -> bool:
        return value in self._data

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedContainer):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # pyright: ignore[reportAssignmentType] as containers are mutable

    # MARK: Views
    def view(self, kind: ViewKind | str) -> TraversalView[T]:
        from ..views import TraversalView

        klass = TraversalView.for_kind(kind)
        self.log.debug("Creating %s view over %d element(s)", klass.kind, len(self._data))
        return klass(self._data, parent=self)

    def order(self) -> InsertionOrder[T]:
        return typing_cast("InsertionOrder[T]", self.view("order"))

    def reverse_order(self) -> ReverseOrder[T]:
        return typing_cast("ReverseOrder[T]", self.view("reverse"))

    def ascending_order(self) -> AscendingOrder[T]:
        return typing_cast("AscendingOrder[T]", self.view("ascending"))

    def descending_order(self) -> DescendingOrder[T]:
        return typing_cast("DescendingOrder[T]", self.view("descending"))

    def side_cross_order(self) -> SideCrossOrder[T]:
        return typing_cast("SideCrossOrder[T]", self.view("side_cross"))

    def middle_out_order(self) -> MiddleOutOrder[T]:
        return typing_cast("MiddleOutOrder[T]", self.view("middle_out"))

    # MARK: Printing
    @override
    def __str__(self) -> str:
        return render(self._data)

    @override
    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self._data!r}>"

    # MARK: Pydantic
    @classmethod
    def __get_pydantic_core_schema__(cls, source: type[Any], handler: GetCoreSchemaHandler) -> CoreSchema:
        element_type = cls.get_element_type(source)
        item_schema = core_schema.any_schema() if element_type is typing.Any else handler.generate_schema(element_type)

        from_list = core_schema.no_info_after_validator_function(
            function=functools.partial(cls.validate_and_coerce, source=source),
            schema=core_schema.list_schema(item_schema),
        )
        return core_schema.json_or_python_schema(
            json_schema=from_list,
            python_schema=core_schema.no_info_before_validator_function(cls._unwrap, from_list),
            serialization=core_schema.plain_serializer_function_ser_schema(list),
        )

    @classmethod
    def _unwrap(cls, value: Any) -> Any:
        from ..views import TraversalView

        if isinstance(value, (OrderedContainer, TraversalView)):
            return list(value)
        return value

    @classmethod
    def validate_and_coerce(cls, value: Iterable[T], *, source: Any = None) -> Self:
        klass = source if source is not None else cls
        try:
            return klass(value)
        except CapabilityError as err:
            msg = f"Cannot build {klass!r} from the given values: {err}"
            raise ValueError(msg) from err


def _resolve_element_type(klass: Any) -> Any:
    if args := typing.get_args(klass):
        return args[0]
    if not isinstance(klass, type):
        return typing.Any

    for base in types.get_original_bases(klass):
        origin = typing.get_origin(base) or base
        if isinstance(origin, type) and issubclass(origin, OrderedContainer) and origin is not klass:
            return _resolve_element_type(base)
    return typing.Any
