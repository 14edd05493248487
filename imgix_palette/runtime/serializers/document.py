# Copyright (c) 2026 imgix-palette contributors
# SPDX-License-Identifier: MIT

"""
JSON serializer.

Produces the same object shape as the original JavaScript package
(``hexDominant``, ``rgbDominant``, ``textColor``), so results can be handed
to front-end code unchanged.
"""

from __future__ import annotations

import json
from typing import Union

from imgix_palette.runtime.serializers.base import SerializerFormat
from imgix_palette.schema import Combo, Palette, TextColor


def to_json(
    result: Union[Palette, TextColor, Combo],
    *,
    format: SerializerFormat = SerializerFormat.JSON,
) -> str:
    """Serialize a palette, text color or combo as JSON.

    Args:
        result: Any value returned by the public entry points.
        format: Compact (JSON) or indented (JSON_PRETTY) output.

    Returns:
        JSON string.

    Example (TextColor, JSON_PRETTY)::

        {
          "colorful": {
            "css": "rgb(10 156 224)",
            "red": 10,
            "green": 156,
            "blue": 224,
            "hex": "#0a9ce0"
          },
          "monochrome": { ... }
        }
    """
    data = result.to_dict()
    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    return json.dumps(data, separators=(",", ":"))
