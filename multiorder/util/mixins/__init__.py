# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro


from .loggable import LoggableMixin, LoggableProtocol


__all__ = [
    "LoggableMixin",
    "LoggableProtocol",
]
