# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro

from .models import BaseConfigModel


__all__ = [
    "BaseConfigModel",
]
