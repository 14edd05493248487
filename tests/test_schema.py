# Copyright (c) 2026 imgix-palette contributors
# SPDX-License-Identifier: MIT

"""Tests for schema types, document parsing and serialization roundtrips."""

import json

import pytest

from imgix_palette.errors import ImgixPaletteError, PaletteFormatError
from imgix_palette.schema import (
    BLACK,
    WHITE,
    Color8,
    Combo,
    Palette,
    RawPalette,
    RawSwatch,
    TextColor,
)

DOCUMENT = {
    "colors": [
        {"red": 0.960784, "green": 0.388235, "blue": 0.121569, "hex": "#f5631f"},
        {"red": 0.054902, "green": 0.254902, "blue": 0.419608, "hex": "#0e416b"},
    ],
    "dominant_colors": {
        "vibrant": {"red": 0.960784, "green": 0.388235, "blue": 0.121569, "hex": "#f5631f"},
        "muted_dark": {"red": 0.054902, "green": 0.254902, "blue": 0.419608, "hex": "#0e416b"},
    },
}


class TestRawSwatch:

    def test_from_dict(self):
        s = RawSwatch.from_dict({"red": 0.1, "green": 0.2, "blue": 0.3, "hex": "#1a334d"})
        assert (s.red, s.green, s.blue, s.hex) == (0.1, 0.2, 0.3, "#1a334d")

    def test_missing_channel(self):
        with pytest.raises(PaletteFormatError, match="missing 'blue'"):
            RawSwatch.from_dict({"red": 0.1, "green": 0.2, "hex": "#000000"})

    def test_non_numeric_channel(self):
        with pytest.raises(PaletteFormatError, match="must be a number"):
            RawSwatch(red="0.1", green=0.2, blue=0.3, hex="#000000")

    def test_bool_channel_rejected(self):
        with pytest.raises(PaletteFormatError, match="must be a number"):
            RawSwatch(red=True, green=0.2, blue=0.3, hex="#000000")

    def test_out_of_range_channel(self):
        with pytest.raises(PaletteFormatError, match="0-1"):
            RawSwatch(red=1.5, green=0.2, blue=0.3, hex="#000000")

    def test_non_string_hex(self):
        with pytest.raises(PaletteFormatError, match="hex"):
            RawSwatch(red=0.1, green=0.2, blue=0.3, hex=None)

    def test_not_an_object(self):
        with pytest.raises(PaletteFormatError, match="must be an object"):
            RawSwatch.from_dict([0.1, 0.2, 0.3])

    def test_frozen(self):
        s = RawSwatch(red=0.1, green=0.2, blue=0.3, hex="#000000")
        with pytest.raises(AttributeError):
            s.red = 0.5


class TestRawPalette:

    def test_from_dict(self):
        raw = RawPalette.from_dict(DOCUMENT)
        assert len(raw.colors) == 2
        assert raw.colors[0].hex == "#f5631f"
        assert list(raw.dominant_colors) == ["vibrant", "muted_dark"]

    def test_roundtrip(self):
        assert RawPalette.from_dict(DOCUMENT).to_dict() == DOCUMENT

    def test_from_json(self):
        raw = RawPalette.from_json(json.dumps(DOCUMENT))
        assert raw == RawPalette.from_dict(DOCUMENT)

    def test_from_json_bytes(self):
        raw = RawPalette.from_json(json.dumps(DOCUMENT).encode())
        assert len(raw.colors) == 2

    def test_invalid_json(self):
        with pytest.raises(PaletteFormatError, match="not valid JSON"):
            RawPalette.from_json("<html>")

    def test_missing_colors(self):
        with pytest.raises(PaletteFormatError, match="missing 'colors'"):
            RawPalette.from_dict({"dominant_colors": {}})

    def test_missing_dominant_colors(self):
        with pytest.raises(PaletteFormatError, match="missing 'dominant_colors'"):
            RawPalette.from_dict({"colors": []})

    def test_colors_must_be_list(self):
        with pytest.raises(PaletteFormatError, match="must be a list"):
            RawPalette.from_dict({"colors": {}, "dominant_colors": {}})

    def test_dominant_colors_must_be_object(self):
        with pytest.raises(PaletteFormatError, match="must be an object"):
            RawPalette.from_dict({"colors": [], "dominant_colors": []})

    def test_error_names_bad_swatch(self):
        doc = {"colors": [DOCUMENT["colors"][0], {"red": 0.1}], "dominant_colors": {}}
        with pytest.raises(PaletteFormatError, match=r"colors\[1\]"):
            RawPalette.from_dict(doc)

    def test_format_error_hierarchy(self):
        assert issubclass(PaletteFormatError, ImgixPaletteError)
        assert issubclass(PaletteFormatError, ValueError)

    def test_dominant_colors_read_only(self):
        raw = RawPalette.from_dict(DOCUMENT)
        with pytest.raises(TypeError):
            raw.dominant_colors["vibrant"] = raw.colors[1]

    def test_hashable(self):
        a = RawPalette.from_dict(DOCUMENT)
        b = RawPalette.from_dict(DOCUMENT)
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_caller_dict_is_copied(self):
        roles = {"vibrant": RawSwatch(red=0.1, green=0.2, blue=0.3, hex="#1a334d")}
        raw = RawPalette(colors=[], dominant_colors=roles)
        roles["muted"] = roles["vibrant"]
        assert list(raw.dominant_colors) == ["vibrant"]
        assert raw.colors == ()


class TestColor8:

    def test_css_and_hex(self):
        c = Color8(red=245, green=99, blue=31)
        assert c.css == "rgb(245 99 31)"
        assert c.hex == "#f5631f"

    def test_invalid_channel(self):
        with pytest.raises(ValueError, match="0-255"):
            Color8(red=256, green=0, blue=0)
        with pytest.raises(ValueError, match="0-255"):
            Color8(red=0, green=-1, blue=0)

    def test_inverted(self):
        assert Color8(10, 100, 250).inverted() == Color8(245, 155, 5)
        assert WHITE.inverted() == BLACK

    def test_from_swatch(self):
        s = RawSwatch(red=1.0, green=0.0, blue=0.4, hex="#ff0066")
        assert Color8.from_swatch(s) == Color8(255, 0, 102)

    def test_to_dict(self):
        assert Color8(1, 2, 3).to_dict() == {"css": "rgb(1 2 3)", "red": 1, "green": 2, "blue": 3}
        assert Color8(1, 2, 3).to_dict(include_hex=True)["hex"] == "#010203"

    def test_from_dict_ignores_derived(self):
        c = Color8.from_dict({"css": "rgb(9 9 9)", "red": 1, "green": 2, "blue": 3, "hex": "#ffffff"})
        assert c == Color8(1, 2, 3)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            WHITE.red = 0


class TestPalette:

    def _palette(self):
        return Palette(
            hex=("#ff0000",),
            rgb=(Color8(255, 0, 0),),
            hex_dominant={"vibrant": "#00ff00"},
            rgb_dominant={"vibrant": Color8(0, 255, 0)},
        )

    def test_to_dict_shape(self):
        assert self._palette().to_dict() == {
            "hex": ["#ff0000"],
            "rgb": [{"css": "rgb(255 0 0)", "red": 255, "green": 0, "blue": 0}],
            "hexDominant": {"vibrant": "#00ff00"},
            "rgbDominant": {
                "vibrant": {"css": "rgb(0 255 0)", "red": 0, "green": 255, "blue": 0},
            },
        }

    def test_dict_roundtrip(self):
        p = self._palette()
        assert Palette.from_dict(p.to_dict()) == p

    def test_mappings_read_only(self):
        p = self._palette()
        with pytest.raises(TypeError):
            p.hex_dominant["muted"] = "#000000"
        with pytest.raises(TypeError):
            p.rgb_dominant["muted"] = Color8(0, 0, 0)

    def test_hashable(self):
        assert hash(self._palette()) == hash(self._palette())
        assert len({self._palette(), self._palette()}) == 1

    def test_json_roundtrip(self):
        p = self._palette()
        assert Palette.from_dict(json.loads(p.to_json())) == p

    def test_mismatched_lengths(self):
        with pytest.raises(ValueError, match="same length"):
            Palette(hex=("#ff0000", "#00ff00"), rgb=(Color8(255, 0, 0),))

    def test_mismatched_roles(self):
        with pytest.raises(ValueError, match="same roles"):
            Palette(
                hex=(),
                rgb=(),
                hex_dominant={"vibrant": "#00ff00"},
                rgb_dominant={"muted": Color8(0, 255, 0)},
            )


class TestTextColorAndCombo:

    def test_text_color_includes_hex(self):
        t = TextColor(colorful=Color8(10, 156, 224), monochrome=BLACK)
        d = t.to_dict()
        assert d["colorful"]["hex"] == "#0a9ce0"
        assert d["monochrome"] == {
            "css": "rgb(0 0 0)", "red": 0, "green": 0, "blue": 0, "hex": "#000000",
        }
        assert TextColor.from_dict(d) == t

    def test_combo_keys(self):
        combo = Combo(
            palette=Palette(hex=(), rgb=()),
            text_color=TextColor(colorful=WHITE, monochrome=BLACK),
        )
        d = combo.to_dict()
        assert list(d) == ["palette", "textColor"]
        assert Combo.from_dict(json.loads(combo.to_json())) == combo
