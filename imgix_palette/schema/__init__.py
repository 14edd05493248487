# Copyright (c) 2026 imgix-palette contributors
# SPDX-License-Identifier: MIT

"""
Schema definitions for palette documents and derived colors.

All types in this module are immutable (frozen dataclasses).
"""

from imgix_palette.schema.palette import (
    BLACK,
    WHITE,
    Channel,
    Color8,
    Combo,
    LuminanceMode,
    Palette,
    RawPalette,
    RawSwatch,
    TextColor,
)

__all__ = [
    # Input document
    "RawSwatch",
    "RawPalette",
    # Derived colors
    "Channel",
    "Color8",
    "WHITE",
    "BLACK",
    "LuminanceMode",
    # Outputs
    "Palette",
    "TextColor",
    "Combo",
]
