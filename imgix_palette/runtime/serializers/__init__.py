# Copyright (c) 2026 imgix-palette contributors
# SPDX-License-Identifier: MIT

"""
Serializers for palette and text color results.

All serializers preserve the computed values exactly.
"""

from imgix_palette.runtime.serializers.base import SerializerFormat
from imgix_palette.runtime.serializers.css import to_css_variables
from imgix_palette.runtime.serializers.document import to_json

__all__ = [
    "SerializerFormat",
    "to_json",
    "to_css_variables",
]
