# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro

"""Element capability checks.

Containers and views only accept element types that provide value equality and
a total order through ``<``. A type provides the order when it defines
``__lt__`` itself, or defines ``__gt__`` so that Python can reflect ``a < b``
into ``b > a``. Inheriting both from :class:`object`, or from a built-in such as
:class:`dict` that only compares for equality, means there is no order.

Type-level checks run as early as possible, on the type arguments of a
subscripted container:

    >>> from multiorder.container.capabilities import check_element_type
    >>> check_element_type(int)
    <class 'int'>
    >>> check_element_type(str | float)
    str | float
    >>> check_element_type(dict)  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    CapabilityError: dict does not support ordering

Arguments that cannot be resolved ahead of time, such as type variables,
:data:`typing.Any` or forward references, are accepted unchanged. The values
stored later are still checked one by one:

    >>> from multiorder.container.capabilities import check_element
    >>> check_element(object())  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    CapabilityError: object does not support ordering

Python values are references, so the copy and move capabilities that an
ordered container needs hold for every object and are not checked.
"""

from __future__ import annotations

import functools
import types
import typing
import weakref

from collections import OrderedDict
from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

from .errors import CapabilityError


# Maximum number of element types remembered as valid.
LRU_CACHE_MAXSIZE = 256

# Built-in types whose rich comparison slot only implements equality.
_EQUALITY_ONLY: frozenset[type] = frozenset(
    {
        object,
        dict,
        OrderedDict,
        complex,
        type(None),
        types.MappingProxyType,
        types.SimpleNamespace,
    }
)

# Runtime types for which a stored value has already answered ``v < v``.
_SELF_COMPARED: weakref.WeakSet[type] = weakref.WeakSet()


@runtime_checkable
class ComparableProtocol(Protocol):
    def __eq__(self, other: object, /) -> bool: ...
    def __lt__(self, other: Any, /) -> bool: ...


def _defines_order(klass: type, name: str) -> bool:
    for base in klass.__mro__:
        if name in base.__dict__:
            return base.__dict__[name] is not None and base not in _EQUALITY_ONLY
    return False


@functools.lru_cache(maxsize=LRU_CACHE_MAXSIZE)
def _check_class(klass: type) -> None:
    if getattr(klass, "__eq__", None) is None:
        msg = f"{klass.__name__} does not support equality"
        raise CapabilityError(msg)

    if getattr(klass, "__lt__", None) is None or not (_defines_order(klass, "__lt__") or _defines_order(klass, "__gt__")):
        msg = f"{klass.__name__} does not support ordering"
        raise CapabilityError(msg)


def _compare_with_self(value: Any) -> None:
    klass = type(value)
    for name in ("__lt__", "__gt__"):
        try:
            result = getattr(klass, name)(value, value)
        except TypeError as err:
            msg = f"{klass.__name__} cannot be compared with itself: {err}"
            raise CapabilityError(msg) from err
        if result is not NotImplemented:
            return

    msg = f"{klass.__name__} does not support ordering"
    raise CapabilityError(msg)


def check_element_type[A](tp: A) -> A:
    """Check that *tp* can be used as a container element type.

    Unions are checked member by member and generic aliases through their origin.

    Raises:
        CapabilityError: If *tp* lacks equality or ordering.

    """
    origin = typing.get_origin(tp)

    if isinstance(tp, types.UnionType) or origin is typing.Union:
        for arg in typing.get_args(tp):
            check_element_type(arg)
    elif origin is typing.Annotated:
        check_element_type(typing.get_args(tp)[0])
    elif isinstance(origin, type):
        _check_class(origin)
    elif isinstance(tp, type):
        _check_class(tp)

    return tp


def check_element[V](value: V) -> V:
    """Check the runtime type of *value*, returning *value* unchanged.

    The first value of each type is also compared with itself, which catches
    ``__lt__`` implementations that always return ``NotImplemented``.
    """
    klass = type(value)
    _check_class(klass)
    if klass not in _SELF_COMPARED:
        _compare_with_self(value)
        _SELF_COMPARED.add(klass)
    return value


def ordered[V](values: Iterable[V], *, reverse: bool = False) -> list[V]:
    """Sort *values* by their intrinsic ``<``.

    Raises:
        CapabilityError: If two of the values cannot be compared with each other.

    """
    try:
        return sorted(values, reverse=reverse)
    except TypeError as err:
        msg = f"Elements cannot be ordered: {err}"
        raise CapabilityError(msg) from err
