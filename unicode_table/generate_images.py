#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import argparse
import re
from pathlib import Path
from typing import List, Optional, Tuple

from .catalog import RecordView, iter_views, load_catalog
from .errors import UnicodeTableError
from .matrix import Grid
from .output import LONE_SURROGATE_RE, write_png

Color = Tuple[int, int, int]

# Same line split Pillow uses for multiline text.
LINE_SPLIT_RE = re.compile(r"\r\n|\r|\n")


def load_pil():
    try:
        from PIL import Image, ImageDraw, ImageFont  # type: ignore
    except Exception as e:
        raise SystemExit(
            "Missing dependency: Pillow.\n"
            "Install with:\n"
            "  pip install pillow\n"
        ) from e
    return Image, ImageDraw, ImageFont


def hex_to_rgb(hexstr: str) -> Color:
    s = hexstr.strip()
    if s.startswith("#"):
        s = s[1:]
    if len(s) == 3:
        s = "".join([c * 2 for c in s])
    if len(s) != 6:
        raise ValueError(f"Invalid color: {hexstr}")
    try:
        return int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16)
    except ValueError as e:
        raise ValueError(f"Invalid color: {hexstr}") from e


def get_font(font_path: Optional[str] = None, size: int = 24):
    """TrueType font at `size`, or Pillow's built-in font when no path is given."""
    _, _, ImageFont = load_pil()
    if font_path:
        try:
            return ImageFont.truetype(font_path, size)
        except OSError as e:
            raise SystemExit(f"Could not load font {font_path}: {e}") from e
    return ImageFont.load_default(size)


def drawable(text: str) -> str:
    # Pillow cannot encode lone surrogates; show their code point instead.
    return LONE_SURROGATE_RE.sub(lambda m: f"<{ord(m.group(0)):04X}>", text)


def line_height(font) -> int:
    bbox = font.getbbox("Ag")
    return int(bbox[3] - bbox[1])


def render_sample_image(
    view: RecordView,
    font,
    padding: int = 24,
    spacing: int = 8,
    bg: Color = (255, 255, 255),
    fg: Color = (0, 0, 0),
):
    """Header line (name + U+ value) followed by the sample text, one image per record."""
    Image, ImageDraw, _ = load_pil()

    lines = [drawable(f"{view.name}  {view.u_plus}")]
    lines.extend(drawable(line) for line in LINE_SPLIT_RE.split(view.sample))

    measure = ImageDraw.Draw(Image.new("RGB", (1, 1)))
    lh = line_height(font)
    widths = [int(round(measure.textlength(line, font=font))) for line in lines]

    w = max(widths) + padding * 2
    h = len(lines) * lh + (len(lines) - 1) * spacing + padding * 2

    img = Image.new("RGB", (max(1, w), max(1, h)), bg)
    draw = ImageDraw.Draw(img)
    y = padding
    for line in lines:
        draw.text((padding, y), line, font=font, fill=fg)
        y += lh + spacing
    return img


def render_matrix_image(
    matrix: Grid,
    font,
    cell_padding: int = 4,
    bg: Color = (255, 255, 255),
    fg: Color = (0, 0, 0),
    grid: Color = (221, 221, 221),
):
    """Draw the pair matrix as a uniform grid; cell size fits the widest pair."""
    Image, ImageDraw, _ = load_pil()

    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if rows == 0 or cols == 0:
        raise ValueError("matrix must have at least one cell")

    measure = ImageDraw.Draw(Image.new("RGB", (1, 1)))
    cell_w = max(int(round(measure.textlength(drawable(cell), font=font))) for row in matrix for cell in row)
    cell_w += cell_padding * 2
    cell_h = line_height(font) + cell_padding * 2

    img = Image.new("RGB", (cols * cell_w + 1, rows * cell_h + 1), bg)
    draw = ImageDraw.Draw(img)

    for i in range(rows + 1):
        draw.line([(0, i * cell_h), (cols * cell_w, i * cell_h)], fill=grid)
    for j in range(cols + 1):
        draw.line([(j * cell_w, 0), (j * cell_w, rows * cell_h)], fill=grid)

    for i, row in enumerate(matrix):
        for j, cell in enumerate(row):
            draw.text((j * cell_w + cell_padding, i * cell_h + cell_padding), drawable(cell), font=font, fill=fg)
    return img


def image_name(view: RecordView, kind: str = "record") -> str:
    return f"{kind}-{view.index:02d}-u{view.hex}.png"


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(
        description="Render PNG previews of each catalog sample (and pair matrices for contextual records)."
    )
    ap.add_argument("--catalog", default=None, help="Catalog JSON (default: packaged data/catalog.json)")
    ap.add_argument("--out-dir", default="dist/images", help="Output directory (default: dist/images)")
    ap.add_argument("--font", default=None, help="TrueType font to render with (default: Pillow built-in)")
    ap.add_argument("--size", type=int, default=24, help="Font size in px (default: 24)")
    ap.add_argument("--matrix-size", type=int, default=12, help="Font size for pair matrices (default: 12)")
    ap.add_argument("--bg", default="#fff", help="Background color (default: #fff)")
    ap.add_argument("--fg", default="#000", help="Text color (default: #000)")
    ap.add_argument("--dry-run", action="store_true", help="Print what would be written, but don't write files")
    args = ap.parse_args(argv)

    if args.size <= 0 or args.matrix_size <= 0:
        raise SystemExit("size and matrix-size must be positive")
    try:
        bg = hex_to_rgb(args.bg)
        fg = hex_to_rgb(args.fg)
    except ValueError as e:
        raise SystemExit(str(e)) from e

    try:
        catalog = load_catalog(Path(args.catalog) if args.catalog else None)
        views = list(iter_views(catalog))
    except UnicodeTableError as e:
        raise SystemExit(f"Catalog error: {e}") from e

    out_dir = Path(args.out_dir)
    font = get_font(args.font, args.size)
    matrix_font = get_font(args.font, args.matrix_size) if any(v.contextual for v in views) else None

    written = 0
    for view in views:
        out_png = out_dir / image_name(view)
        if args.dry_run:
            print(f"[DRY] {view.name} {view.u_plus} -> {out_png.as_posix()}")
        else:
            write_png(out_png, render_sample_image(view, font, bg=bg, fg=fg))
            written += 1
            print(f"✓ {view.name} {view.u_plus} -> {out_png.as_posix()}")

        if view.matrix is None:
            continue
        out_matrix = out_dir / image_name(view, kind="matrix")
        if args.dry_run:
            print(f"[DRY] {view.name} matrix -> {out_matrix.as_posix()}")
        else:
            write_png(out_matrix, render_matrix_image(view.matrix, matrix_font, bg=bg, fg=fg))
            written += 1
            print(f"✓ {view.name} matrix -> {out_matrix.as_posix()}")

    if not args.dry_run:
        print(f"\nDone. Wrote {written} PNG(s) into {out_dir.resolve()}")


if __name__ == "__main__":
    main()
