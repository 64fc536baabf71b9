# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro

from __future__ import annotations

import weakref

from typing import Any, override

from ..logging import LoggableProtocol, Logger, getLogger


class _LogDescriptor:
    """Resolve ``.log`` on both classes and instances.

    Instances cache their logger in ``__dict__``. Classes get a ``T(<name>)`` logger.
    """

    def __get__(self, obj: Any, cls: type | None = None) -> Logger:
        if obj is None:
            return getLogger(f"T({cls.__name__})" if cls is not None else "T(?)")

        log = obj.__dict__.get("_log")
        if log is None:
            log = obj.__dict__["_log"] = getLogger(obj.__log_name__, parent=obj.log_parent)
        return log


class LoggableMixin:
    """Mixin that adds a logger to a class.

    Provides a ``.log`` attribute. When the instance has a ``log_parent`` that
    is itself loggable, the logger is nested under the parent's logger, so that
    for example the views of a container log as ``OrderedContainer.AscendingOrder``.

    The parent is held through a weak reference and never kept alive by its children.
    Parents that are not loggable are ignored.
    """

    log = _LogDescriptor()

    # MARK: Parent
    @property
    def log_parent(self) -> LoggableProtocol | None:
        parent = self.__dict__.get("_log_parent")
        return parent() if isinstance(parent, weakref.ref) else None

    @log_parent.setter
    def log_parent(self, new_parent: object | None) -> None:
        if isinstance(new_parent, LoggableProtocol):
            self.__dict__["_log_parent"] = weakref.ref(new_parent)
        else:
            self.__dict__.pop("_log_parent", None)
        self._reset_log_cache()

    @property
    def __log_name__(self) -> str:
        return type(self).__name__

    def _reset_log_cache(self) -> None:
        self.__dict__.pop("_log", None)

    @override
    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"
