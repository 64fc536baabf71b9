# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro

from .capabilities import ComparableProtocol, check_element, check_element_type
from .container import OrderedContainer
from .errors import CapabilityError, ContainerError, ElementNotFoundError, OutOfRangeError
from .rendering import render


__all__ = [
    "CapabilityError",
    "ComparableProtocol",
    "ContainerError",
    "ElementNotFoundError",
    "OrderedContainer",
    "OutOfRangeError",
    "check_element",
    "check_element_type",
    "render",
]
