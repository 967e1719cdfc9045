"""Shared fixtures: throwaway catalogs and a tiny TrueType font."""

import json
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from unicode_table.catalog import Catalog, ContextualRecord, SimpleRecord


@pytest.fixture
def write_catalog(tmp_path):
    """Write a catalog JSON file and return its path."""

    def _write(records, title="Test Table", start="The lazy fox", end="jumped over the blah.", name="catalog.json"):
        path = tmp_path / name
        data = {"version": 1, "title": title, "anchors": {"start": start, "end": end}, "records": records}
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def simple_catalog():
    return Catalog(
        title="Simple",
        start="A",
        end="B",
        records=(
            SimpleRecord(name="tab", code="\t", sample="A\tB"),
            SimpleRecord(name="zws", code=chr(0x200B), sample="A" + chr(0x200B) + "B"),
        ),
    )


@pytest.fixture
def contextual_catalog():
    return Catalog(
        title="Contextual",
        start="A",
        end="B",
        records=(
            SimpleRecord(name="tab", code="\t", sample="A\tB"),
            ContextualRecord(name="zwj", code=chr(0x200D), sample="A" + chr(0x200D) + "B"),
        ),
    )


@pytest.fixture
def tiny_font(tmp_path) -> Path:
    """TrueType font mapping space, 'A' and ZERO WIDTH SPACE only."""
    upm, ascent, descent = 1000, 800, -200
    fb = FontBuilder(upm, isTTF=True)
    fb.setupGlyphOrder([".notdef", "space", "A", "zwsp"])

    pen = TTGlyphPen(None)
    pen.moveTo((50, 0))
    pen.lineTo((450, 0))
    pen.lineTo((450, 700))
    pen.lineTo((50, 700))
    pen.closePath()
    box = pen.glyph()

    fb.setupGlyf(
        {
            ".notdef": box,
            "space": TTGlyphPen(None).glyph(),
            "A": box,
            "zwsp": TTGlyphPen(None).glyph(),
        }
    )
    fb.setupHorizontalMetrics({".notdef": (500, 50), "space": (250, 0), "A": (500, 50), "zwsp": (0, 0)})
    fb.setupCharacterMap({0x20: "space", 0x41: "A", 0x200B: "zwsp"})
    fb.setupHorizontalHeader(ascent=ascent, descent=descent)
    fb.setupOS2(sTypoAscender=ascent, sTypoDescender=descent, usWinAscent=ascent, usWinDescent=-descent)
    fb.setupNameTable(
        {
            "familyName": "Tiny",
            "styleName": "Regular",
            "uniqueFontIdentifier": "Tiny-Regular",
            "fullName": "Tiny Regular",
            "psName": "Tiny-Regular",
            "version": "Version 1.000",
        }
    )
    fb.setupPost()

    path = tmp_path / "tiny.ttf"
    fb.save(str(path))
    return path
