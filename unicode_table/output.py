# -*- coding: utf-8 -*-

from __future__ import annotations

import re
from pathlib import Path

# Lone surrogates cannot be encoded as UTF-8; generators spell them out instead.
LONE_SURROGATE_RE = re.compile("[" + chr(0xD800) + "-" + chr(0xDFFF) + "]")


def write_text_lf(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(text)


def write_png(path: Path, img) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    img.save(path, format="PNG")
