# Copyright (c) 2026 imgix-palette contributors
# SPDX-License-Identifier: MIT

"""
Color computation core for imgix-palette.

Pure, deterministic functions over already-fetched palette documents.
Nothing in this package performs I/O.
"""

from imgix_palette.compute.colorspace import float_to_8bit, to_css, to_hex
from imgix_palette.compute.luminance import classify, perceptual_luminance
from imgix_palette.compute.palette import build_palette
from imgix_palette.compute.text import colorful_text_color, monochrome_text_color

__all__ = [
    "float_to_8bit",
    "to_css",
    "to_hex",
    "perceptual_luminance",
    "classify",
    "build_palette",
    "colorful_text_color",
    "monochrome_text_color",
]
