# Copyright (c) 2026 imgix-palette contributors
# SPDX-License-Identifier: MIT

"""
Palette normalization.

Turns the raw imgix document into parallel hex / 8-bit structures. Order and
role names are carried through untouched; nothing is filtered or sorted.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from imgix_palette.compute.colorspace import floats_to_8bit
from imgix_palette.compute.luminance import swatch_channels
from imgix_palette.schema import Color8, Palette, RawPalette, RawSwatch

logger = logging.getLogger(__name__)


def swatches_to_color8(colors: Sequence[RawSwatch]) -> tuple[Color8, ...]:
    """
    Convert swatches to 8-bit colors.

    Every channel converts from its own float; blue comes from the swatch's
    blue value.
    """
    eight_bit = floats_to_8bit(swatch_channels(colors))
    return tuple(
        Color8(red=int(r), green=int(g), blue=int(b)) for r, g, b in eight_bit
    )


def _dominant(
    dominant_colors: Mapping[str, RawSwatch],
) -> tuple[dict[str, str], dict[str, Color8]]:
    """Build role→hex and role→Color8 mappings, preserving role order."""
    roles = list(dominant_colors)
    converted = swatches_to_color8([dominant_colors[role] for role in roles])

    hex_dominant = {role: dominant_colors[role].hex for role in roles}
    rgb_dominant = dict(zip(roles, converted))
    return hex_dominant, rgb_dominant


def build_palette(raw: RawPalette) -> Palette:
    """
    Build a normalized palette from a raw imgix document.

    - ``hex``: each swatch's reported hex, verbatim (not recomputed)
    - ``rgb``: each swatch as an 8-bit color
    - ``hex_dominant`` / ``rgb_dominant``: the same per dominant role

    Args:
        raw: The parsed ``?palette=json`` document

    Returns:
        Palette with the same swatch count and role set as the input
    """
    hex_dominant, rgb_dominant = _dominant(raw.dominant_colors)

    palette = Palette(
        hex=tuple(c.hex for c in raw.colors),
        rgb=swatches_to_color8(raw.colors),
        hex_dominant=hex_dominant,
        rgb_dominant=rgb_dominant,
    )
    logger.debug(
        "Built palette with %d swatches and roles %s",
        len(palette.rgb), ", ".join(palette.roles) or "(none)",
    )
    return palette
