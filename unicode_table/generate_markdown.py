#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import argparse
import unicodedata
from pathlib import Path
from typing import List, Optional

from .catalog import Catalog, RecordView, iter_views, load_catalog
from .codepoints import format_u_plus
from .errors import UnicodeTableError
from .output import write_text_lf

ESCAPES = {"\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t", "|": "\\|"}

# Categories that would break a table row or vanish without a trace.
SPELLED_OUT_CATEGORIES = {"Cc", "Cs", "Zl", "Zp"}


def safe_label(text: str) -> str:
    """Make a cell value survive a Markdown table row; format characters are kept raw on purpose."""
    parts: List[str] = []
    for ch in text:
        if ch in ESCAPES:
            parts.append(ESCAPES[ch])
        elif unicodedata.category(ch) in SPELLED_OUT_CATEGORIES:
            parts.append(f"[{format_u_plus(ord(ch))}]")
        else:
            parts.append(ch)
    return "".join(parts)


def render_row(view: RecordView) -> str:
    cells = [
        safe_label(view.name),
        str(view.codepoint),
        f"u{view.hex}",
        view.u_plus,
        safe_label(view.sample),
    ]
    return "| " + " | ".join(cells) + " |"


def render_markdown(catalog: Catalog) -> str:
    lines: List[str] = []
    lines.append(f"# {safe_label(catalog.title)}")
    lines.append("")
    lines.append("| Name | Decimal | Hex | Code point | Sample |")
    lines.append("| --- | ---: | --- | --- | --- |")

    contextual: List[RecordView] = []
    for view in iter_views(catalog):
        lines.append(render_row(view))
        if view.contextual:
            contextual.append(view)

    if contextual:
        lines.append("")
        for view in contextual:
            rows = len(view.matrix or ())
            cols = len(view.matrix[0]) if view.matrix else 0
            lines.append(
                f"- {safe_label(view.name)} ({view.u_plus}) is contextual: "
                f"see the {rows}×{cols} pair matrix on the HTML page."
            )

    lines.append("")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Generate a Markdown table of the catalog characters.")
    ap.add_argument("--catalog", default=None, help="Catalog JSON (default: packaged data/catalog.json)")
    ap.add_argument(
        "--out",
        default="dist/unicode-table.md",
        help="Output Markdown path (default: dist/unicode-table.md)",
    )
    ap.add_argument("--dry-run", action="store_true", help="Print what would be written, but don't write files")
    args = ap.parse_args(argv)

    out_path = Path(args.out)

    try:
        catalog = load_catalog(Path(args.catalog) if args.catalog else None)
        content = render_markdown(catalog)
    except UnicodeTableError as e:
        raise SystemExit(f"Catalog error: {e}") from e

    if args.dry_run:
        print(f"[DRY] {len(catalog)} record(s) -> {out_path.as_posix()}")
        return

    write_text_lf(out_path, content)
    print(f"✓ Wrote {out_path.as_posix()} ({len(catalog)} record(s))")


if __name__ == "__main__":
    main()
