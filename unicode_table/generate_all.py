#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Tuple


def run(cmd: List[str]) -> None:
    printable = " ".join(cmd)
    print(f"\n▶ {printable}")
    try:
        subprocess.run(cmd, check=True)
    except FileNotFoundError as e:
        raise SystemExit(
            f"Failed to run: {printable}\n"
            f"Reason: {e}\n"
            f"Tip: Make sure Python is available and the package is installed."
        ) from e
    except subprocess.CalledProcessError as e:
        raise SystemExit(f"Command failed (exit code {e.returncode}): {printable}") from e


def build_steps(out_dir: Path, catalog: Optional[str], font: Optional[str]) -> List[Tuple[str, List[str]]]:
    common: List[str] = ["--catalog", catalog] if catalog else []
    font_args: List[str] = ["--font", font] if font else []

    return [
        ("generate_page", [*common, *font_args, "--out", (out_dir / "index.html").as_posix()]),
        ("generate_markdown", [*common, "--out", (out_dir / "unicode-table.md").as_posix()]),
        ("generate_images", [*common, *font_args, "--out-dir", (out_dir / "images").as_posix()]),
    ]


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Run every generator: HTML page, Markdown table and PNG previews.")
    ap.add_argument("--catalog", default=None, help="Catalog JSON (default: packaged data/catalog.json)")
    ap.add_argument("--font", default=None, help="Font passed to the page (glyph column) and image generators")
    ap.add_argument("--out-dir", default="dist", help="Output directory (default: dist)")
    args = ap.parse_args(argv)

    # Use the same Python interpreter that runs this script.
    py = sys.executable

    for module, step_args in build_steps(Path(args.out_dir), args.catalog, args.font):
        run([py, "-m", f"unicode_table.{module}", *step_args])

    print("\n✅ All generation steps completed.")


if __name__ == "__main__":
    main()
