"""Tests for the Markdown table generator."""

import pytest

from unicode_table.catalog import Catalog, SimpleRecord, load_catalog
from unicode_table.generate_markdown import main, render_markdown, safe_label


class TestSafeLabel:
    def test_whitespace_escapes(self):
        assert safe_label("a\tb\nc\rd") == "a\\tb\\nc\\rd"

    def test_pipe_is_escaped(self):
        assert safe_label("a|b") == "a\\|b"

    def test_backslash_is_escaped(self):
        assert safe_label("a\\|b") == "a\\\\\\|b"

    def test_control_characters_are_spelled_out(self):
        assert safe_label(chr(7)) == "[U+0007]"
        assert safe_label(chr(0x85)) == "[U+0085]"

    def test_line_and_paragraph_separators_are_spelled_out(self):
        assert safe_label(chr(0x2028) + chr(0x2029)) == "[U+2028][U+2029]"

    def test_format_characters_stay_raw(self):
        text = "a" + chr(0x200B) + chr(0x200D) + "b"
        assert safe_label(text) == text


class TestRenderMarkdown:
    def test_header(self):
        md = render_markdown(load_catalog())
        lines = md.splitlines()
        assert lines[0] == "# Unicode Special Characters"
        assert lines[2] == "| Name | Decimal | Hex | Code point | Sample |"

    def test_one_row_per_record(self):
        catalog = load_catalog()
        md = render_markdown(catalog)
        rows = [line for line in md.splitlines() if line.startswith("| ") and not line.startswith("| ---")][1:]
        assert len(rows) == len(catalog)

    def test_tab_row(self):
        md = render_markdown(load_catalog())
        assert "| tab | 9 | u9 | U+0009 | The lazy fox\\tjumped over the blah. |" in md

    def test_bel_row(self):
        md = render_markdown(load_catalog())
        assert "| bel | 7 | u7 | U+0007 | The lazy fox[U+0007]jumped over the blah. |" in md

    def test_contextual_note(self, contextual_catalog):
        md = render_markdown(contextual_catalog)
        assert "zwj (U+200D) is contextual" in md
        assert "96×96" in md

    def test_no_note_without_contextual(self, simple_catalog):
        assert "contextual" not in render_markdown(simple_catalog)

    def test_pipe_in_name(self):
        catalog = Catalog(title="t", start="", end="", records=(SimpleRecord(name="a|b", code="x", sample="x"),))
        assert "| a\\|b | 120 |" in render_markdown(catalog)


class TestMain:
    def test_writes_file(self, tmp_path, capsys):
        out = tmp_path / "table.md"
        main(["--out", str(out)])
        assert out.read_text(encoding="utf-8").startswith("# Unicode Special Characters")
        assert "✓ Wrote" in capsys.readouterr().out

    def test_dry_run(self, tmp_path):
        out = tmp_path / "table.md"
        main(["--out", str(out), "--dry-run"])
        assert not out.exists()

    def test_non_utf8_catalog_exits(self, tmp_path):
        catalog = tmp_path / "catalog.json"
        catalog.write_bytes(b"\xff\xfe{}")
        with pytest.raises(SystemExit, match="Could not read"):
            main(["--catalog", str(catalog), "--out", str(tmp_path / "table.md")])
