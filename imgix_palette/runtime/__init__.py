# Copyright (c) 2026 imgix-palette contributors
# SPDX-License-Identifier: MIT

"""
Runtime for imgix-palette: fetching, public entry points and serializers.

The computation core (``imgix_palette.compute``) never performs I/O; this
package supplies the palette document and formats the results.
"""

from imgix_palette.runtime.api import (
    combo_from_raw,
    get_combo,
    get_palette,
    get_text_color,
    palette_from_raw,
    text_color_from_raw,
)
from imgix_palette.runtime.fetch import FetchConfig, fetch_raw_palette, palette_url
from imgix_palette.runtime.serializers import (
    SerializerFormat,
    to_css_variables,
    to_json,
)

__all__ = [
    "get_palette",
    "get_text_color",
    "get_combo",
    "palette_from_raw",
    "text_color_from_raw",
    "combo_from_raw",
    "FetchConfig",
    "fetch_raw_palette",
    "palette_url",
    "SerializerFormat",
    "to_json",
    "to_css_variables",
]
