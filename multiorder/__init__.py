# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro

"""Generic ordered container with six traversal views.

An :class:`OrderedContainer` stores elements in insertion order, duplicates
included, and hands out read-only views that snapshot its contents:

* :meth:`~OrderedContainer.order`: insertion order
* :meth:`~OrderedContainer.reverse_order`: last added first
* :meth:`~OrderedContainer.ascending_order` / :meth:`~OrderedContainer.descending_order`: sorted by ``<``
* :meth:`~OrderedContainer.side_cross_order`: smallest, largest, second smallest, ...
* :meth:`~OrderedContainer.middle_out_order`: centre element first, then outwards

Example::

    >>> from multiorder import OrderedContainer
    >>> c = OrderedContainer[str](["delta", "alpha", "echo", "", "bravo", "alpha", "charlie"])
    >>> c.remove("alpha")
    >>> list(c.side_cross_order())
    ['', 'echo', 'bravo', 'delta', 'charlie']
    >>> view = c.reverse_order()
    >>> cursor = view.begin()
    >>> cursor.current()
    'charlie'
    >>> cursor.advance().current()
    'bravo'
"""

from .container import (
    CapabilityError,
    ComparableProtocol,
    ContainerError,
    ElementNotFoundError,
    OrderedContainer,
    OutOfRangeError,
)
from .views import (
    AscendingOrder,
    Cursor,
    DescendingOrder,
    InsertionOrder,
    MiddleOutOrder,
    ReverseOrder,
    SideCrossOrder,
    TraversalView,
    ViewKind,
)


__all__ = [
    "AscendingOrder",
    "CapabilityError",
    "ComparableProtocol",
    "ContainerError",
    "Cursor",
    "DescendingOrder",
    "ElementNotFoundError",
    "InsertionOrder",
    "MiddleOutOrder",
    "OrderedContainer",
    "OutOfRangeError",
    "ReverseOrder",
    "SideCrossOrder",
    "TraversalView",
    "ViewKind",
]
