"""Shared fixtures: small fonts generated with fontTools."""

from collections.abc import Callable
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont


def build_font(family: str, style: str = "Regular", typographic_family: str | None = None) -> TTFont:
    """Build a minimal TrueType font with a box for .notdef and A."""
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder([".notdef", "A"])
    fb.setupCharacterMap({ord("A"): "A"})

    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.lineTo((0, 500))
    pen.lineTo((500, 500))
    pen.lineTo((500, 0))
    pen.closePath()
    box = pen.glyph()
    fb.setupGlyf({".notdef": box, "A": box})

    fb.setupHorizontalMetrics({".notdef": (500, 0), "A": (500, 0)})
    fb.setupHorizontalHeader(ascent=800, descent=-200)

    names = {"familyName": family, "styleName": style}
    if typographic_family is not None:
        names["typographicFamily"] = typographic_family
    fb.setupNameTable(names)
    fb.setupOS2()
    fb.setupPost()
    return fb.font


@pytest.fixture
def make_font(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing a minimal font file under tmp_path."""

    def _make(
        filename: str,
        family: str,
        style: str = "Regular",
        typographic_family: str | None = None,
    ) -> Path:
        path = tmp_path / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        build_font(family, style, typographic_family).save(str(path))
        return path

    return _make
