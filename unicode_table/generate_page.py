#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import argparse
import html
from pathlib import Path
from typing import Dict, List, Optional

from .catalog import Catalog, RecordView, for_each_record, load_catalog
from .errors import FontError, UnicodeTableError
from .output import LONE_SURROGATE_RE, write_text_lf

COLUMNS = 5

STYLESHEET = """\
body { font-family: sans-serif; margin: 2em; }
.unicode-table__table { border-collapse: collapse; }
.unicode-table__table td { border: 1px solid #ddd; padding: 0.25em 0.5em; vertical-align: top; }
.unicode-table__name { font-weight: bold; }
.unicode-table__value { font-family: monospace; background: #fffbe6; }
.unicode-table__sample { white-space: pre-wrap; }
.unicode-table__char-matrix { border-collapse: collapse; font-family: monospace; font-size: 0.75em; }
.unicode-table__char-matrix__cell { border: 1px solid #eee; padding: 0 0.2em; white-space: pre; }
"""


def escape_text(text: str) -> str:
    escaped = html.escape(text, quote=True)
    return LONE_SURROGATE_RE.sub(lambda m: f"&#x{ord(m.group(0)):X};", escaped)


def render_matrix(view: RecordView) -> List[str]:
    out: List[str] = []
    out.append('<tr class="unicode-table__char-matrix-row">')
    out.append(f'<td colspan="{COLUMNS}">')
    out.append('<table class="unicode-table__char-matrix">')
    for row in view.matrix or ():
        cells = "".join(f'<td class="unicode-table__char-matrix__cell">{escape_text(c)}</td>' for c in row)
        out.append(f'<tr class="unicode-table__char-matrix__row">{cells}</tr>')
    out.append("</table>")
    out.append("</td>")
    out.append("</tr>")
    return out


def render_page(catalog: Catalog, cmap: Optional[Dict[int, str]] = None) -> str:
    """
    Full HTML document: per record a value row, a sample row and, for
    contextual records, the nested pair matrix.

    With `cmap` (from font_coverage.load_cmap) the last column shows the
    glyph name the font maps the codepoint to.
    """
    title = escape_text(catalog.title)

    out: List[str] = []
    out.append("<!DOCTYPE html>")
    out.append('<html lang="en">')
    out.append("<head>")
    out.append('<meta charset="utf-8"/>')
    out.append(f"<title>{title}</title>")
    out.append(f"<style>\n{STYLESHEET}</style>")
    out.append("</head>")
    out.append("<body>")
    out.append(f"<h1>{title}</h1>")
    out.append('<div class="unicode-table">')
    out.append('<table class="unicode-table__table">')

    def visit(view: RecordView) -> None:
        glyph = ""
        if cmap is not None:
            glyph = cmap.get(view.codepoint) or "(none)"

        name_attrs = ' class="unicode-table__name"'
        if view.note:
            name_attrs += f' title="{escape_text(view.note)}"'

        out.append(f'<tr class="unicode-table__row" id="record-{view.index}">')
        out.append(f"<td{name_attrs}>{escape_text(view.name)}</td>")
        out.append(f"<td>{view.codepoint}</td>")
        out.append(f"<td>u{view.hex}</td>")
        out.append(f'<td class="unicode-table__value">{escape_text(view.code)}</td>')
        out.append(f'<td class="unicode-table__value">{escape_text(glyph)}</td>')
        out.append("</tr>")
        out.append("<tr>")
        out.append(f'<td class="unicode-table__sample" colspan="{COLUMNS}">{escape_text(view.sample)}</td>')
        out.append("</tr>")
        if view.contextual:
            out.extend(render_matrix(view))

    for_each_record(catalog, visit)

    out.append("</table>")
    out.append("</div>")
    out.append("</body>")
    out.append("</html>")
    out.append("")
    return "\n".join(out)


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(
        description="Generate an HTML page listing the catalog characters with sample text."
    )
    ap.add_argument("--catalog", default=None, help="Catalog JSON (default: packaged data/catalog.json)")
    ap.add_argument("--out", default="dist/index.html", help="Output HTML path (default: dist/index.html)")
    ap.add_argument("--font", default=None, help="TrueType/OpenType font; adds a glyph column from its cmap")
    ap.add_argument("--dry-run", action="store_true", help="Print what would be written, but don't write files")
    args = ap.parse_args(argv)

    out_path = Path(args.out)

    cmap = None
    if args.font:
        from .font_coverage import load_cmap

        try:
            cmap = load_cmap(Path(args.font))
        except FontError as e:
            raise SystemExit(str(e)) from e

    try:
        catalog = load_catalog(Path(args.catalog) if args.catalog else None)
        page = render_page(catalog, cmap=cmap)
    except UnicodeTableError as e:
        raise SystemExit(f"Catalog error: {e}") from e

    if args.dry_run:
        print(f"[DRY] {len(catalog)} record(s) -> {out_path.as_posix()}")
        return

    write_text_lf(out_path, page)
    print(f"✓ Wrote {out_path.as_posix()} ({len(catalog)} record(s))")


if __name__ == "__main__":
    main()
