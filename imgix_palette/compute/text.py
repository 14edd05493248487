# Copyright (c) 2026 imgix-palette contributors
# SPDX-License-Identifier: MIT

"""
Text color selection for text overlaid on an image.

Two independent choices are made from the same swatch list:

1. Colorful -- invert the swatch that best represents the palette's tonal bias
2. Monochrome -- black or white, chosen by the palette's luminance mode
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from imgix_palette.compute.luminance import LIGHT_THRESHOLD, classify, perceptual_luminances
from imgix_palette.schema import BLACK, WHITE, Channel, Color8, LuminanceMode, RawSwatch

logger = logging.getLogger(__name__)


def accumulate_channels(colors: Sequence[RawSwatch]) -> dict[Channel, float]:
    """
    Sum each channel across all swatches.

    Swatches are added in input order, one running total per channel.
    """
    totals = {channel: 0.0 for channel in Channel}
    for color in colors:
        for channel in Channel:
            totals[channel] += color.channel(channel)
    return totals


def tonal_bias(totals: dict[Channel, float]) -> Channel:
    """
    The channel with the largest accumulated total.

    Ties go to the channel declared first in ``Channel`` (red, then green,
    then blue).
    """
    bias_value = max(totals.values())
    return next(channel for channel in Channel if totals[channel] == bias_value)


def dominant_bias_color(colors: Sequence[RawSwatch]) -> RawSwatch:
    """
    First swatch whose bias channel reaches the set's average for that channel.

    Raises:
        ValueError: If ``colors`` is empty
    """
    if not colors:
        raise ValueError("Cannot pick a text color from an empty palette")

    totals = accumulate_channels(colors)
    bias = tonal_bias(totals)
    average = totals[bias] / len(colors)

    for color in colors:
        if color.channel(bias) >= average:
            return color

    # Float rounding can push the mean of identical values above all of them
    return max(colors, key=lambda c: c.channel(bias))


def colorful_text_color(colors: Sequence[RawSwatch]) -> Color8:
    """
    A contrasting color derived from the palette's tonal bias.

    Finds whether the palette as a whole leans red, green, or blue, picks the
    first swatch that is at least average in that channel, and inverts all
    three of its 8-bit channels. Perceptual luminance and the number of
    biased swatches are not considered.

    Args:
        colors: Swatches in document order (non-empty)

    Returns:
        The inverted color
    """
    source = dominant_bias_color(colors)
    color = Color8.from_swatch(source).inverted()
    logger.debug("Colorful text color %s (inverted from %s)", color.hex, source.hex)
    return color


def _mode_to_text(mode: LuminanceMode) -> Color8 | None:
    """Light text on dark images, dark text on light images."""
    if mode is LuminanceMode.DARK:
        return WHITE
    if mode is LuminanceMode.LIGHT:
        return BLACK
    return None


def monochrome_text_color(colors: Sequence[RawSwatch]) -> Color8:
    """
    Black or white, whichever suits the palette's luminance.

    Decision procedure:
    1. Classify all swatch luminances. DARK → white, LIGHT → black.
    2. If MULTI, classify the first ceil(n/2) luminances (the "favored" half).
    3. If that is also MULTI, use the first swatch alone: white if its
       luminance is <= 0.5, otherwise black.

    Args:
        colors: Swatches in document order (non-empty)

    Returns:
        ``WHITE`` or ``BLACK``
    """
    if not colors:
        raise ValueError("Cannot pick a text color from an empty palette")

    luminances = perceptual_luminances(colors)

    mode = classify(luminances)
    text = _mode_to_text(mode)
    if text is None:
        favored = luminances[: math.ceil(len(colors) / 2)]
        mode = classify(favored)
        text = _mode_to_text(mode)
        if text is None:
            text = BLACK if favored[0] > LIGHT_THRESHOLD else WHITE

    logger.debug("Monochrome text color %s (luminance mode %s)", text.hex, mode.value)
    return text
