# -*- coding: utf-8 -*-

"""
Static inspection tables for Unicode special characters.

A catalog of characters (whitespace, joiners, directional marks, annotation
controls) is rendered as an HTML page, a Markdown table and PNG previews, each
character shown inside sample text so renderer quirks become visible.
"""

from __future__ import annotations

from .catalog import (
    Catalog,
    ContextualRecord,
    RecordView,
    SimpleRecord,
    for_each_record,
    iter_views,
    load_catalog,
)
from .codepoints import decode, format_hex, format_u_plus, parse_hex, utf16_units
from .errors import FontError, InvalidInputError, MalformedRecordError, UnicodeTableError
from .matrix import MATRIX_END, MATRIX_START, build_matrix

__version__ = "0.1.0"

__all__ = [
    "Catalog",
    "ContextualRecord",
    "FontError",
    "InvalidInputError",
    "MATRIX_END",
    "MATRIX_START",
    "MalformedRecordError",
    "RecordView",
    "SimpleRecord",
    "UnicodeTableError",
    "build_matrix",
    "decode",
    "for_each_record",
    "format_hex",
    "format_u_plus",
    "iter_views",
    "load_catalog",
    "parse_hex",
    "utf16_units",
]
