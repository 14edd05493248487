# Copyright (c) 2026 imgix-palette contributors
# SPDX-License-Identifier: MIT

"""
CSS custom property serializer.

Emits a rule block that exposes palette and text colors as CSS variables,
ready to drop into a stylesheet or a ``<style>`` tag.
"""

from __future__ import annotations

import re
from typing import Union

from imgix_palette.schema import Combo, Palette, TextColor

_UNSAFE_IDENT_RE = re.compile(r"[^a-zA-Z0-9-]+")


def _ident(name: str) -> str:
    """Make a role name safe for use in a custom property name."""
    return _UNSAFE_IDENT_RE.sub("-", name.replace("_", "-")).strip("-").lower()


def _palette_declarations(palette: Palette, prefix: str) -> list[tuple[str, str]]:
    declarations = [(f"--{prefix}-{i}", color.hex) for i, color in enumerate(palette.rgb)]
    declarations.extend(
        (f"--{prefix}-{_ident(role)}", color.hex)
        for role, color in palette.rgb_dominant.items()
    )
    return declarations


def _text_declarations(text_color: TextColor) -> list[tuple[str, str]]:
    return [
        ("--text-colorful", text_color.colorful.hex),
        ("--text-monochrome", text_color.monochrome.hex),
    ]


def to_css_variables(
    result: Union[Palette, TextColor, Combo],
    *,
    prefix: str = "palette",
    selector: str = ":root",
) -> str:
    """Serialize colors as CSS custom properties.

    Swatches are numbered in document order, dominant roles are named
    (``muted_dark`` becomes ``--palette-muted-dark``). Text colors are
    always ``--text-colorful`` and ``--text-monochrome``.

    Args:
        result: Any value returned by the public entry points.
        prefix: Custom property prefix for palette colors.
        selector: Selector the declarations are scoped to.

    Returns:
        CSS rule block.

    Example::

        :root {
          --palette-0: #f5631f;
          --palette-vibrant: #f5631f;
          --text-colorful: #0a9ce0;
          --text-monochrome: #000000;
        }
    """
    declarations: list[tuple[str, str]] = []
    if isinstance(result, Combo):
        declarations += _palette_declarations(result.palette, prefix)
        declarations += _text_declarations(result.text_color)
    elif isinstance(result, Palette):
        declarations += _palette_declarations(result, prefix)
    elif isinstance(result, TextColor):
        declarations += _text_declarations(result)
    else:
        raise TypeError(f"Cannot serialize {type(result).__name__} as CSS variables")

    lines = [f"{selector} {{"]
    lines.extend(f"  {name}: {value};" for name, value in declarations)
    lines.append("}")
    return "\n".join(lines)
