# Copyright (c) 2026 imgix-palette contributors
# SPDX-License-Identifier: MIT

"""
Channel conversions between imgix float RGB and 8-bit RGB.

Conversion chain: float RGB [0,1] → 8-bit RGB [0,255] → CSS / hex string

Floats are scaled by 255 rather than 256 so that 1.0 maps to 255 and the
midpoint of each output bucket is the exact float value.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from imgix_palette.schema.palette import Channel, Color8


# =============================================================================
# Float ↔ 8-bit
# =============================================================================


def floats_to_8bit(channels: ArrayLike) -> NDArray[np.int64]:
    """
    Convert float channel values [0,1] to 8-bit integers [0,255].

    Rounds half away from zero (``floor(x * 255 + 0.5)`` on the non-negative
    domain), not NumPy's default round-half-to-even.

    Args:
        channels: Array of any shape with float values in [0, 1]

    Returns:
        Integer array of the same shape
    """
    scaled = np.asarray(channels, dtype=np.float64) * 255.0
    return np.floor(scaled + 0.5).astype(np.int64)


def float_to_8bit(channel: float) -> int:
    """Convert a single float channel [0,1] to an 8-bit integer [0,255]."""
    return int(floats_to_8bit(channel))


# =============================================================================
# 8-bit → string forms
# =============================================================================


def to_css(color: Color8) -> str:
    """
    Format an 8-bit color as a CSS Color Level 4 string.

    Returns:
        String like "rgb(245 99 31)" (space separated, no commas)
    """
    return f"rgb({color.red} {color.green} {color.blue})"


def to_hex(color: Color8) -> str:
    """
    Format an 8-bit color as a hex string.

    Channels are always emitted red, green, blue regardless of how the
    color was constructed.

    Returns:
        Lowercase hex string like "#f5631f"
    """
    return "#" + "".join(f"{getattr(color, channel.value):02x}" for channel in Channel)
