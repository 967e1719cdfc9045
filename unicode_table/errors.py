# -*- coding: utf-8 -*-

from __future__ import annotations


class UnicodeTableError(ValueError):
    pass


class InvalidInputError(UnicodeTableError):
    """Text value that is not one UTF-16 code unit or one valid surrogate pair."""


class MalformedRecordError(UnicodeTableError):
    """Catalog entry that cannot be rendered (bad shape, empty separator, undecodable code)."""


class FontError(UnicodeTableError):
    """Font file that cannot be opened or read."""
