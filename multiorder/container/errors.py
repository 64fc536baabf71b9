# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro


class ContainerError(Exception):
    """Base class for every error raised by :mod:`multiorder`."""


class ElementNotFoundError(ContainerError, LookupError):
    """Raised when removing a value that no slot of the container is equal to."""


class OutOfRangeError(ContainerError, IndexError):
    """Raised by checked element access and by cursors positioned at or past the end of a view."""


class CapabilityError(ContainerError, TypeError):
    """Signals an element type that cannot be stored or traversed.

    Elements must support value equality and a total order through ``<``.
    This error is raised as early as possible: when subscripting a container
    with an element type, before a value is stored, or when a view fails to
    order its snapshot.
    """
