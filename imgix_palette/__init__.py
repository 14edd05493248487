# Copyright (c) 2026 imgix-palette contributors
# SPDX-License-Identifier: MIT

"""
imgix-palette -- Presentation-ready colors from imgix palette metadata.

Reads an imgix-served image's ``?palette=json`` document and derives a
normalized palette plus readable overlay text colors.

Quick start::

    from imgix_palette import get_combo

    combo = await get_combo("https://assets.imgix.net/hp/snowshoe.jpg")
    combo.palette.hex               # Swatch hex strings
    combo.text_color.monochrome.css # "rgb(0 0 0)" or "rgb(255 255 255)"
    combo.to_json()                 # Same shape as the JavaScript package
"""

from __future__ import annotations

__version__ = "1.0.0"

from imgix_palette.errors import FetchFailure, ImgixPaletteError, PaletteFormatError
from imgix_palette.runtime import (
    FetchConfig,
    combo_from_raw,
    get_combo,
    get_palette,
    get_text_color,
    palette_from_raw,
    text_color_from_raw,
)
from imgix_palette.schema import (
    Color8,
    Combo,
    Palette,
    RawPalette,
    RawSwatch,
    TextColor,
)

__all__ = [
    # Core API
    "get_palette",
    "get_text_color",
    "get_combo",
    # Offline composition
    "palette_from_raw",
    "text_color_from_raw",
    "combo_from_raw",
    "FetchConfig",
    # Types (commonly needed)
    "RawSwatch",
    "RawPalette",
    "Color8",
    "Palette",
    "TextColor",
    "Combo",
    # Errors
    "ImgixPaletteError",
    "FetchFailure",
    "PaletteFormatError",
    # Version
    "__version__",
]
