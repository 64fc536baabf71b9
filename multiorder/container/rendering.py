# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro

from collections.abc import Iterable


def render(values: Iterable[object]) -> str:
    """Render *values* as ``{e1, e2, ..., en}`` using each element's ``str()``.

    >>> render([1, 2, 3])
    '{1, 2, 3}'
    >>> render(["", "@@@", ""])
    '{, @@@, }'
    >>> render([])
    '{}'
    """
    return "{" + ", ".join(str(value) for value in values) + "}"
