# Copyright (c) 2026 imgix-palette contributors
# SPDX-License-Identifier: MIT

"""
Perceptual luminance and light/dark classification.

Luminance uses a simple gamma-weighted estimate on the float channels:

    ((R^2.2 * 0.2126) + (G^2.2 * 0.7152) + (B^2.2 * 0.0722)) ^ 0.6

Reference: https://gist.github.com/Myndex/e1025706436736166561d339fd667493
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from imgix_palette.schema.palette import LuminanceMode, RawSwatch

# Rec. 709 channel weights
RED_WEIGHT = 0.2126
GREEN_WEIGHT = 0.7152
BLUE_WEIGHT = 0.0722

GAMMA = 2.2
PERCEPTUAL_EXPONENT = 0.6

# Values strictly above this count as light
LIGHT_THRESHOLD = 0.5


def swatch_channels(colors: Sequence[RawSwatch]) -> NDArray[np.float64]:
    """Stack swatch float channels into an (N, 3) array in red, green, blue order."""
    return np.array(
        [(c.red, c.green, c.blue) for c in colors], dtype=np.float64
    ).reshape(-1, 3)


def luminance_of(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Vectorized perceptual luminance.

    Args:
        rgb: Array of shape (..., 3) with float channels in [0, 1]

    Returns:
        Array of shape (...) with luminance values
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    linear = np.power(rgb, GAMMA)
    # Summed left to right, one term per channel
    weighted = (
        linear[..., 0] * RED_WEIGHT
        + linear[..., 1] * GREEN_WEIGHT
        + linear[..., 2] * BLUE_WEIGHT
    )
    return np.power(weighted, PERCEPTUAL_EXPONENT)


def perceptual_luminance(swatch: RawSwatch) -> float:
    """Perceptual luminance of a single swatch's float channels."""
    return float(luminance_of([swatch.red, swatch.green, swatch.blue]))


def perceptual_luminances(colors: Sequence[RawSwatch]) -> NDArray[np.float64]:
    """Perceptual luminance of every swatch, in input order."""
    return luminance_of(swatch_channels(colors))


def classify(luminances: ArrayLike) -> LuminanceMode:
    """
    Classify a luminance sequence as predominantly light, dark, or mixed.

    Only values strictly greater than 0.5 count as light. The light count is
    compared with half the sequence length (a non-integer for odd lengths):
    more than half is LIGHT, fewer is DARK, exactly half is MULTI.

    Example:
        >>> classify([0.9, 0.9, 0.9, 0.1])
        <LuminanceMode.LIGHT: 'light'>
        >>> classify([0.9, 0.1])
        <LuminanceMode.MULTI: 'multi'>

    Raises:
        ValueError: If the sequence is empty
    """
    values = np.asarray(luminances, dtype=np.float64).ravel()
    if values.size == 0:
        raise ValueError("Cannot classify an empty luminance sequence")

    half = values.size / 2
    total_light = int(np.count_nonzero(values > LIGHT_THRESHOLD))

    if total_light > half:
        return LuminanceMode.LIGHT
    if total_light < half:
        return LuminanceMode.DARK
    return LuminanceMode.MULTI
