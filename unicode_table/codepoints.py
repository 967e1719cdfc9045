# -*- coding: utf-8 -*-

"""
UTF-16 code unit helpers.

Python strings hold code points, not UTF-16 units, so a character above
U+FFFF is one `str` element but two units. `utf16_units` re-encodes with
`surrogatepass` so U+1F600 written as one character or as the explicit
pair D83D DE00 comes out as the same two units.
"""

from __future__ import annotations

import re
from typing import Tuple

from .errors import InvalidInputError

HIGH_SURROGATE_MIN = 0xD800
HIGH_SURROGATE_MAX = 0xDBFF
LOW_SURROGATE_MIN = 0xDC00
LOW_SURROGATE_MAX = 0xDFFF
SUPPLEMENTARY_BASE = 0x10000

HEX_RE = re.compile(r"^(?:[uU]\+?)?([0-9a-fA-F]{1,6})$")


def utf16_units(code: str) -> Tuple[int, ...]:
    raw = code.encode("utf-16-le", "surrogatepass")
    return tuple(int.from_bytes(raw[i : i + 2], "little") for i in range(0, len(raw), 2))


def is_high_surrogate(unit: int) -> bool:
    return HIGH_SURROGATE_MIN <= unit <= HIGH_SURROGATE_MAX


def is_low_surrogate(unit: int) -> bool:
    return LOW_SURROGATE_MIN <= unit <= LOW_SURROGATE_MAX


def decode(code: str) -> int:
    """
    Scalar value of a single UTF-16 code unit or of one surrogate pair.

    Raises InvalidInputError for empty input, more than two units, or a pair
    whose units are not high-then-low surrogates.
    """
    if not isinstance(code, str):
        raise InvalidInputError(f"Expected a text value, got {type(code).__name__}")

    units = utf16_units(code)
    if len(units) == 1:
        return units[0]

    if len(units) == 2:
        high, low = units
        if not is_high_surrogate(high):
            raise InvalidInputError(f"First unit 0x{high:04X} is not a high surrogate")
        if not is_low_surrogate(low):
            raise InvalidInputError(f"Second unit 0x{low:04X} is not a low surrogate")
        return (high - HIGH_SURROGATE_MIN) * 0x400 + (low - LOW_SURROGATE_MIN) + SUPPLEMENTARY_BASE

    if not units:
        raise InvalidInputError("Cannot decode an empty text value")
    raise InvalidInputError(f"Expected 1 or 2 UTF-16 code units, got {len(units)}")


def format_hex(cp: int) -> str:
    return f"{cp:x}"


def format_u_plus(cp: int) -> str:
    return f"U+{cp:04X}"


def parse_hex(text: str) -> int:
    m = HEX_RE.match(text.strip())
    if not m:
        raise InvalidInputError(f"Could not parse codepoint from {text!r}")
    return int(m.group(1), 16)
