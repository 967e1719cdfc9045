# -*- coding: utf-8 -*-

"""
Test catalog: the ordered list of characters to inspect.

The catalog lives in data/catalog.json so entries can be switched on and off
(`"enabled": false`) without touching code. Codes are written as code point
notation ("U+200B") and samples as templates, which keeps invisible
characters out of the data file itself.

Lifecycle: load_catalog() once at startup, then pass the Catalog into the
generators. Nothing mutates it afterwards.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterator, List, Optional, Tuple, Union

from .codepoints import decode, format_hex, format_u_plus, parse_hex
from .errors import InvalidInputError, MalformedRecordError
from .matrix import Grid, build_matrix

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "catalog.json"
DEFAULT_TITLE = "Unicode Special Characters"
DEFAULT_SAMPLE = "{start}{code}{end}"

CODE_TOKEN_RE = re.compile(r"^[uU]\+([0-9a-fA-F]{1,6})$")
PLACEHOLDER_RE = re.compile(r"\{([^{}]*)\}")


# -----------------------------
# Records
# -----------------------------
@dataclass(frozen=True)
class SimpleRecord:
    name: str
    code: str
    sample: str
    note: str = ""

    @property
    def contextual(self) -> bool:
        return False


@dataclass(frozen=True)
class ContextualRecord:
    """Record that is also rendered as a full ASCII pair matrix around its code."""

    name: str
    code: str
    sample: str
    note: str = ""

    @property
    def contextual(self) -> bool:
        return True


Record = Union[SimpleRecord, ContextualRecord]


@dataclass(frozen=True)
class Catalog:
    title: str
    start: str
    end: str
    records: Tuple[Record, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "records", tuple(self.records))

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)


@dataclass(frozen=True)
class RecordView:
    """Everything a renderer needs for one record, already decoded."""

    index: int
    record: Record
    codepoint: int
    matrix: Optional[Grid]

    @property
    def name(self) -> str:
        return self.record.name

    @property
    def code(self) -> str:
        return self.record.code

    @property
    def sample(self) -> str:
        return self.record.sample

    @property
    def note(self) -> str:
        return self.record.note

    @property
    def contextual(self) -> bool:
        return self.record.contextual

    @property
    def hex(self) -> str:
        return format_hex(self.codepoint)

    @property
    def u_plus(self) -> str:
        return format_u_plus(self.codepoint)


# -----------------------------
# Loading
# -----------------------------
def join_surrogates(text: str) -> str:
    # Valid high/low pairs become one character; lone surrogates stay as they are.
    return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


def parse_code_notation(notation: str) -> str:
    """
    "U+200B" -> the character itself. Several space separated values are
    concatenated, so "U+D83D U+DE00" spells a surrogate pair explicitly.
    """
    chars: List[str] = []
    for token in notation.split():
        m = CODE_TOKEN_RE.match(token)
        if not m:
            raise MalformedRecordError(f"Invalid code notation {token!r} (expected U+XXXX)")
        cp = int(m.group(1), 16)
        if cp > 0x10FFFF:
            raise MalformedRecordError(f"Code point {token} is outside the Unicode range")
        chars.append(chr(cp))
    return join_surrogates("".join(chars))


def expand_sample(template: str, start: str, end: str, code: str) -> str:
    def repl(m: re.Match) -> str:
        key = m.group(1)
        if key == "start":
            return start
        if key == "end":
            return end
        if key == "code":
            return code
        if key[:2].upper() != "U+":
            raise MalformedRecordError(f"Unknown placeholder {{{key}}} in sample {template!r}")
        try:
            cp = parse_hex(key)
        except InvalidInputError as e:
            raise MalformedRecordError(f"Invalid placeholder {{{key}}} in sample {template!r}") from e
        if cp > 0x10FFFF:
            raise MalformedRecordError(f"Placeholder {{{key}}} is outside the Unicode range")
        return chr(cp)

    return join_surrogates(PLACEHOLDER_RE.sub(repl, template))


def _flag(raw: Dict[str, object], key: str, default: bool, name: str) -> bool:
    value = raw.get(key, default)
    if not isinstance(value, bool):
        raise MalformedRecordError(f"Record {name!r}: {key} must be true or false, got {value!r}")
    return value


def parse_record(raw: Dict[str, object], start: str, end: str, position: int) -> Optional[Record]:
    if not isinstance(raw, dict):
        raise MalformedRecordError(f"Record #{position} is not an object")

    name = raw.get("name")
    if not isinstance(name, str) or not name.strip():
        raise MalformedRecordError(f"Record #{position} has no name")

    if not _flag(raw, "enabled", True, name):
        return None

    notation = raw.get("code", "")
    if not isinstance(notation, str):
        raise MalformedRecordError(f"Record {name!r}: code must be a string")
    code = parse_code_notation(notation)

    template = raw.get("sample", DEFAULT_SAMPLE)
    if not isinstance(template, str):
        raise MalformedRecordError(f"Record {name!r}: sample must be a string")
    try:
        sample = expand_sample(template, start, end, code)
    except MalformedRecordError as e:
        raise MalformedRecordError(f"Record {name!r}: {e}") from e

    note = str(raw.get("note", ""))
    if _flag(raw, "contextual", False, name):
        return ContextualRecord(name=name, code=code, sample=sample, note=note)
    return SimpleRecord(name=name, code=code, sample=sample, note=note)


def catalog_from_dict(data: Dict[str, object]) -> Catalog:
    if not isinstance(data, dict):
        raise MalformedRecordError("Catalog must be a JSON object")

    anchors = data.get("anchors", {})
    if not isinstance(anchors, dict):
        raise MalformedRecordError("Catalog anchors must be an object")
    start = str(anchors.get("start", ""))
    end = str(anchors.get("end", ""))

    raw_records = data.get("records")
    if not isinstance(raw_records, list):
        raise MalformedRecordError("Catalog has no records list")

    records: List[Record] = []
    for position, raw in enumerate(raw_records):
        record = parse_record(raw, start, end, position)
        if record is not None:
            records.append(record)

    return Catalog(
        title=str(data.get("title", DEFAULT_TITLE)),
        start=start,
        end=end,
        records=tuple(records),
    )


def load_catalog(path: Optional[Path] = None) -> Catalog:
    catalog_path = Path(path) if path is not None else DEFAULT_CATALOG_PATH
    try:
        data = json.loads(catalog_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise MalformedRecordError(f"Could not parse {catalog_path.as_posix()}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedRecordError(f"Could not read {catalog_path.as_posix()}: {e}") from e
    return catalog_from_dict(data)


# -----------------------------
# Iteration
# -----------------------------
def validate_catalog(catalog: Catalog) -> None:
    for index, record in enumerate(catalog.records):
        if isinstance(record, ContextualRecord) and not record.code:
            raise MalformedRecordError(
                f"Record #{index} {record.name!r} is contextual but has no code to use as separator"
            )
        try:
            decode(record.code)
        except InvalidInputError as e:
            raise MalformedRecordError(f"Record #{index} {record.name!r}: {e}") from e


def iter_views(catalog: Catalog) -> Iterator[RecordView]:
    """
    Yield one RecordView per record in declaration order.

    The whole catalog is validated before the first view is produced, so a
    renderer never sees half a table.
    """
    validate_catalog(catalog)
    for index, record in enumerate(catalog.records):
        matrix = build_matrix(record.code) if isinstance(record, ContextualRecord) else None
        yield RecordView(index=index, record=record, codepoint=decode(record.code), matrix=matrix)


def for_each_record(catalog: Catalog, visitor: Callable[[RecordView], None]) -> None:
    for view in iter_views(catalog):
        visitor(view)
