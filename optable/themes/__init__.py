"""
Optable CLI Options

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .colors import NordColors, get_nord_theme

__all__ = [
    "NordColors",
    "get_nord_theme",
]
