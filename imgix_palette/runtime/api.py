# Copyright (c) 2026 imgix-palette contributors
# SPDX-License-Identifier: MIT

"""
Public entry points.

``get_palette``, ``get_text_color`` and ``get_combo`` each fetch the palette
document for an imgix-served image and return None if the fetch fails.
The ``*_from_raw`` functions do the same work on an already-parsed document.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from imgix_palette.compute.palette import build_palette
from imgix_palette.compute.text import colorful_text_color, monochrome_text_color
from imgix_palette.errors import FetchFailure
from imgix_palette.runtime.fetch import FetchConfig, fetch_raw_palette
from imgix_palette.schema import Combo, Palette, RawPalette, TextColor

logger = logging.getLogger(__name__)


# =============================================================================
# Pure composition
# =============================================================================


def palette_from_raw(raw: RawPalette) -> Palette:
    """Normalized palette for a parsed document."""
    return build_palette(raw)


def text_color_from_raw(raw: RawPalette) -> TextColor:
    """Overlay text colors for a parsed document."""
    return TextColor(
        colorful=colorful_text_color(raw.colors),
        monochrome=monochrome_text_color(raw.colors),
    )


def combo_from_raw(raw: RawPalette) -> Combo:
    """Palette and text colors for a parsed document."""
    return Combo(palette=palette_from_raw(raw), text_color=text_color_from_raw(raw))


# =============================================================================
# Fetching entry points
# =============================================================================


async def _fetch_or_none(
    url: str,
    config: Optional[FetchConfig],
    client: Optional[httpx.AsyncClient],
) -> Optional[RawPalette]:
    try:
        return await fetch_raw_palette(url, config=config, client=client)
    except FetchFailure as exc:
        logger.warning("%s", exc)
        return None


async def get_palette(
    url: str,
    *,
    config: Optional[FetchConfig] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Optional[Palette]:
    """
    Formatted palette for an imgix-served image.

    Args:
        url: URL of an imgix-served image. Not validated.
        config: Fetch configuration
        client: Optional shared ``httpx.AsyncClient``

    Returns:
        Palette, or None if the palette document could not be fetched

    Raises:
        PaletteFormatError: The endpoint answered with a malformed document

    Example:
        >>> palette = await get_palette("https://assets.imgix.net/hp/snowshoe.jpg")
        >>> palette.hex_dominant["vibrant"]
        '#f5631f'
    """
    raw = await _fetch_or_none(url, config, client)
    if raw is None:
        return None
    return palette_from_raw(raw)


async def get_text_color(
    url: str,
    *,
    config: Optional[FetchConfig] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Optional[TextColor]:
    """
    Colors suitable for text overlaid on an imgix-served image.

    Returns:
        TextColor with a ``colorful`` and a ``monochrome`` choice, or None if
        the palette document could not be fetched
    """
    raw = await _fetch_or_none(url, config, client)
    if raw is None:
        return None
    return text_color_from_raw(raw)


async def get_combo(
    url: str,
    *,
    config: Optional[FetchConfig] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Optional[Combo]:
    """Palette and text colors from a single fetch, or None if the fetch fails."""
    raw = await _fetch_or_none(url, config, client)
    if raw is None:
        return None
    return combo_from_raw(raw)
