# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import Tuple

# Printable ASCII range paired on both sides of the separator (inclusive).
MATRIX_START = 32
MATRIX_END = 127

Grid = Tuple[Tuple[str, ...], ...]


def matrix_chars() -> Tuple[str, ...]:
    return tuple(chr(cp) for cp in range(MATRIX_START, MATRIX_END + 1))


def build_matrix(separator: str) -> Grid:
    """
    Every printable ASCII character paired with every other one around
    `separator`: cell [i][j] is chr(32 + i) + separator + chr(32 + j).

    96 x 96 = 9216 cells, used to scan for ligatures, collapsing or
    reordering that only shows up next to particular neighbours.
    """
    chars = matrix_chars()
    return tuple(tuple(a + separator + b for b in chars) for a in chars)
