#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Check which catalog characters a font actually maps.

Invisible characters are often "visible" in a browser only because the font
lacks them and a fallback (or a .notdef box) is drawn instead, so the cmap
is worth knowing when reading the generated page.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from .catalog import Catalog, iter_views, load_catalog
from .codepoints import format_u_plus
from .errors import FontError, UnicodeTableError

try:
    from fontTools.ttLib import TTFont, TTLibError
except Exception:
    print("Missing dependency: fonttools")
    print("Install with:  pip install fonttools")
    raise


@dataclass(frozen=True)
class CoverageEntry:
    name: str
    codepoint: int
    glyph: Optional[str]

    @property
    def covered(self) -> bool:
        return self.glyph is not None


def load_cmap(font_path: Path) -> Dict[int, str]:
    try:
        font = TTFont(str(font_path))
    except (OSError, TTLibError) as e:
        raise FontError(f"Could not open font {Path(font_path).as_posix()}: {e}") from e
    try:
        return dict(font.getBestCmap() or {})
    finally:
        font.close()


def check_coverage(catalog: Catalog, cmap: Dict[int, str]) -> List[CoverageEntry]:
    return [
        CoverageEntry(name=view.name, codepoint=view.codepoint, glyph=cmap.get(view.codepoint))
        for view in iter_views(catalog)
    ]


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Report which catalog characters a font has glyphs for.")
    ap.add_argument("font", help="TrueType/OpenType font file")
    ap.add_argument("--catalog", default=None, help="Catalog JSON (default: packaged data/catalog.json)")
    ap.add_argument("--strict", action="store_true", help="Exit non-zero if any character is missing")
    args = ap.parse_args(argv)

    try:
        cmap = load_cmap(Path(args.font))
    except FontError as e:
        raise SystemExit(str(e)) from e

    try:
        catalog = load_catalog(Path(args.catalog) if args.catalog else None)
        entries = check_coverage(catalog, cmap)
    except UnicodeTableError as e:
        raise SystemExit(f"Catalog error: {e}") from e

    missing = 0
    for entry in entries:
        if entry.covered:
            print(f"✓ {format_u_plus(entry.codepoint)} {entry.name} -> {entry.glyph}")
        else:
            missing += 1
            print(f"✗ {format_u_plus(entry.codepoint)} {entry.name}")

    print(f"\nDone. {len(entries) - missing}/{len(entries)} character(s) mapped by {Path(args.font).name}")
    if missing and args.strict:
        raise SystemExit(f"{missing} character(s) missing from {args.font}")


if __name__ == "__main__":
    main()
