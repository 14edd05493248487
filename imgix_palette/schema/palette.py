# Copyright (c) 2026 imgix-palette contributors
# SPDX-License-Identifier: MIT

"""
Palette schema -- the imgix ``?palette=json`` document and the colors derived from it.

Design principles:
- Immutable: All types are frozen dataclasses; mappings are read-only views
  and sequences are tuples, so every value is hashable
- Order-preserving: Swatch order and dominant-color role order mirror the input
- Serializable: ``to_dict()`` mirrors the object shape of the original JavaScript package

Input document shape::

    {
      "colors": [
        {"red": 0.96, "green": 0.39, "blue": 0.12, "hex": "#f5631f"},
        ...
      ],
      "dominant_colors": {
        "vibrant": {"red": 0.96, "green": 0.39, "blue": 0.12, "hex": "#f5631f"},
        "muted": {...},
        ...
      }
    }

Channel floats are in [0, 1]. Derived colors (``Color8``) are 8-bit integers.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Optional

from imgix_palette.errors import PaletteFormatError


# =============================================================================
# Enumerations
# =============================================================================


class Channel(Enum):
    """
    The three color channels.

    Declaration order is significant: it is the tie-break priority when
    two channels accumulate the same total.
    """
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class LuminanceMode(Enum):
    """Classification of a luminance sequence."""
    LIGHT = "light"
    DARK = "dark"
    MULTI = "multi"  # As many light values as not-light values


# =============================================================================
# Input Document
# =============================================================================


def _frozen_mapping(mapping: Mapping) -> MappingProxyType:
    """Read-only, insertion-ordered copy of a mapping."""
    return MappingProxyType(dict(mapping))


def _require(data: Mapping, key: str, where: str):
    if not isinstance(data, Mapping):
        raise PaletteFormatError(f"{where} must be an object, got {type(data).__name__}")
    if key not in data:
        raise PaletteFormatError(f"{where} is missing '{key}'")
    return data[key]


@dataclass(frozen=True, slots=True)
class RawSwatch:
    """
    One sampled color from the image, as reported by imgix.

    Attributes:
        red: Red channel (0.0-1.0)
        green: Green channel (0.0-1.0)
        blue: Blue channel (0.0-1.0)
        hex: Hex string reported by imgix, passed through untouched
    """
    red: float
    green: float
    blue: float
    hex: str

    def __post_init__(self) -> None:
        """Validate channel values are within [0, 1]."""
        for channel in Channel:
            value = getattr(self, channel.value)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise PaletteFormatError(
                    f"Channel '{channel.value}' must be a number, got {value!r}"
                )
            if not 0.0 <= value <= 1.0:
                raise PaletteFormatError(
                    f"Channel '{channel.value}' must be 0-1, got {value}"
                )
        if not isinstance(self.hex, str):
            raise PaletteFormatError(f"Swatch hex must be a string, got {self.hex!r}")

    def channel(self, channel: Channel) -> float:
        """Float value of a single channel."""
        return getattr(self, channel.value)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"red": self.red, "green": self.green, "blue": self.blue, "hex": self.hex}

    @classmethod
    def from_dict(cls, data: Mapping, where: str = "swatch") -> RawSwatch:
        """Deserialize from dictionary, raising PaletteFormatError on bad shape."""
        return cls(
            red=_require(data, "red", where),
            green=_require(data, "green", where),
            blue=_require(data, "blue", where),
            hex=_require(data, "hex", where),
        )


@dataclass(frozen=True, slots=True)
class RawPalette:
    """
    The full palette document for one image.

    Attributes:
        colors: Swatches in the order imgix reported them
        dominant_colors: Role name (e.g. "vibrant", "muted_dark") to swatch,
            in the order the roles appeared in the document
    """
    colors: tuple[RawSwatch, ...]
    dominant_colors: Mapping[str, RawSwatch] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze the containers so the document cannot change after parsing."""
        object.__setattr__(self, "colors", tuple(self.colors))
        object.__setattr__(self, "dominant_colors", _frozen_mapping(self.dominant_colors))

    def __hash__(self) -> int:
        return hash((self.colors, tuple(self.dominant_colors.items())))

    def to_dict(self) -> dict:
        """Serialize back to the imgix document shape."""
        return {
            "colors": [c.to_dict() for c in self.colors],
            "dominant_colors": {
                role: swatch.to_dict() for role, swatch in self.dominant_colors.items()
            },
        }

    @classmethod
    def from_dict(cls, data: Mapping) -> RawPalette:
        """
        Deserialize an imgix palette document.

        Raises:
            PaletteFormatError: If ``colors`` or ``dominant_colors`` is missing
                or any swatch is malformed.
        """
        colors = _require(data, "colors", "palette document")
        if isinstance(colors, (str, bytes, Mapping)) or not isinstance(colors, (list, tuple)):
            raise PaletteFormatError("'colors' must be a list")
        dominant = _require(data, "dominant_colors", "palette document")
        if not isinstance(dominant, Mapping):
            raise PaletteFormatError("'dominant_colors' must be an object")

        return cls(
            colors=tuple(
                RawSwatch.from_dict(c, where=f"colors[{i}]") for i, c in enumerate(colors)
            ),
            dominant_colors={
                str(role): RawSwatch.from_dict(swatch, where=f"dominant_colors.{role}")
                for role, swatch in dominant.items()
            },
        )

    @classmethod
    def from_json(cls, json_str: str | bytes) -> RawPalette:
        """Deserialize from a JSON string."""
        try:
            data = json.loads(json_str)
        except ValueError as exc:
            raise PaletteFormatError(f"Palette document is not valid JSON: {exc}") from exc
        return cls.from_dict(data)


# =============================================================================
# Derived Colors
# =============================================================================


@dataclass(frozen=True, slots=True)
class Color8:
    """
    An 8-bit RGB color.

    Attributes:
        red: Red channel (0-255)
        green: Green channel (0-255)
        blue: Blue channel (0-255)
    """
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        """Validate channel values are 8-bit."""
        for channel in Channel:
            value = getattr(self, channel.value)
            if not 0 <= value <= 255:
                raise ValueError(f"Channel '{channel.value}' must be 0-255, got {value}")

    @property
    def css(self) -> str:
        """CSS color string like ``rgb(245 99 31)``."""
        from imgix_palette.compute.colorspace import to_css
        return to_css(self)

    @property
    def hex(self) -> str:
        """Lowercase hex string like ``#f5631f``."""
        from imgix_palette.compute.colorspace import to_hex
        return to_hex(self)

    def inverted(self) -> Color8:
        """The color with every channel flipped (``255 - c``)."""
        return Color8(red=255 - self.red, green=255 - self.green, blue=255 - self.blue)

    def to_dict(self, include_hex: bool = False) -> dict:
        """
        Serialize to dictionary.

        Args:
            include_hex: If True, include the hex value
        """
        d = {"css": self.css, "red": self.red, "green": self.green, "blue": self.blue}
        if include_hex:
            d["hex"] = self.hex
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Color8:
        """Deserialize from dictionary (``css``/``hex`` are derived and ignored)."""
        return cls(red=data["red"], green=data["green"], blue=data["blue"])

    @classmethod
    def from_swatch(cls, swatch: RawSwatch) -> Color8:
        """Convert each float channel of a swatch independently."""
        from imgix_palette.compute.colorspace import float_to_8bit
        return cls(
            red=float_to_8bit(swatch.red),
            green=float_to_8bit(swatch.green),
            blue=float_to_8bit(swatch.blue),
        )


WHITE = Color8(red=255, green=255, blue=255)
BLACK = Color8(red=0, green=0, blue=0)


# =============================================================================
# Outputs
# =============================================================================


@dataclass(frozen=True, slots=True)
class Palette:
    """
    Normalized palette for an image.

    Attributes:
        hex: Swatch hex strings, verbatim from the document
        rgb: Swatches as 8-bit colors, same order as ``hex``
        hex_dominant: Role name to hex string
        rgb_dominant: Role name to 8-bit color
    """
    hex: tuple[str, ...]
    rgb: tuple[Color8, ...]
    hex_dominant: Mapping[str, str] = field(default_factory=dict)
    rgb_dominant: Mapping[str, Color8] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze the containers and validate the parallel structures line up."""
        object.__setattr__(self, "hex", tuple(self.hex))
        object.__setattr__(self, "rgb", tuple(self.rgb))
        object.__setattr__(self, "hex_dominant", _frozen_mapping(self.hex_dominant))
        object.__setattr__(self, "rgb_dominant", _frozen_mapping(self.rgb_dominant))

        if len(self.hex) != len(self.rgb):
            raise ValueError(
                f"hex and rgb must have the same length, got {len(self.hex)} and {len(self.rgb)}"
            )
        if list(self.hex_dominant) != list(self.rgb_dominant):
            raise ValueError("hex_dominant and rgb_dominant must share the same roles")

    def __hash__(self) -> int:
        return hash((
            self.hex,
            self.rgb,
            tuple(self.hex_dominant.items()),
            tuple(self.rgb_dominant.items()),
        ))

    @property
    def roles(self) -> tuple[str, ...]:
        """Dominant-color role names in document order."""
        return tuple(self.hex_dominant)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "hex": list(self.hex),
            "rgb": [c.to_dict() for c in self.rgb],
            "hexDominant": dict(self.hex_dominant),
            "rgbDominant": {role: c.to_dict() for role, c in self.rgb_dominant.items()},
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> Palette:
        """Deserialize from dictionary."""
        return cls(
            hex=tuple(data["hex"]),
            rgb=tuple(Color8.from_dict(c) for c in data["rgb"]),
            hex_dominant=dict(data["hexDominant"]),
            rgb_dominant={
                role: Color8.from_dict(c) for role, c in data["rgbDominant"].items()
            },
        )


@dataclass(frozen=True, slots=True)
class TextColor:
    """
    Suitable colors for text overlaid on an image.

    Attributes:
        colorful: Inverted tonal-bias color from the image's own palette
        monochrome: Black or white, whichever reads better on the image
    """
    colorful: Color8
    monochrome: Color8

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "colorful": self.colorful.to_dict(include_hex=True),
            "monochrome": self.monochrome.to_dict(include_hex=True),
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> TextColor:
        """Deserialize from dictionary."""
        return cls(
            colorful=Color8.from_dict(data["colorful"]),
            monochrome=Color8.from_dict(data["monochrome"]),
        )


@dataclass(frozen=True, slots=True)
class Combo:
    """Palette and text color computed from the same document."""
    palette: Palette
    text_color: TextColor

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"palette": self.palette.to_dict(), "textColor": self.text_color.to_dict()}

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> Combo:
        """Deserialize from dictionary."""
        return cls(
            palette=Palette.from_dict(data["palette"]),
            text_color=TextColor.from_dict(data["textColor"]),
        )
