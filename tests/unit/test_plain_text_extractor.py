"""Tests for PlainTextExtractor."""

from __future__ import annotations

from pathlib import Path

import pytest

from decision_audit.exceptions import TextExtractionError, UnsupportedFormatError
from decision_audit.extractors.plain_text import PlainTextExtractor
from decision_audit.interfaces.extraction import ITextExtractor


class TestPlainTextExtractor:
    def test_is_text_extractor(self):
        assert isinstance(PlainTextExtractor(), ITextExtractor)

    def test_supports(self):
        extractor = PlainTextExtractor()
        assert extractor.supports(Path("letter.txt"))
        assert extractor.supports(Path("LETTER.TXT"))
        assert not extractor.supports(Path("letter.pdf"))

    def test_extract(self, tmp_path, minimal_letter):
        path = tmp_path / "letter.txt"
        path.write_text(minimal_letter, encoding="utf-8")
        extracted = PlainTextExtractor().extract(path)
        assert extracted.text == minimal_letter
        assert extracted.page_count == 1
        assert extracted.had_selectable_text is True

    def test_blank_file_has_no_selectable_text(self, tmp_path):
        path = tmp_path / "blank.txt"
        path.write_text("  \n\n", encoding="utf-8")
        assert PlainTextExtractor().extract(path).had_selectable_text is False

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "scan.pdf"
        path.write_bytes(b"%PDF-1.7")
        with pytest.raises(UnsupportedFormatError) as info:
            PlainTextExtractor().extract(path)
        assert info.value.suffix == ".pdf"

    def test_missing_file(self, tmp_path):
        with pytest.raises(TextExtractionError) as info:
            PlainTextExtractor().extract(tmp_path / "missing.txt")
        assert not isinstance(info.value, UnsupportedFormatError)

    def test_invalid_bytes_replaced(self):
        extracted = PlainTextExtractor().extract_bytes(b"caf\xe9", "letter.txt")
        assert extracted.text == "caf\ufffd"

    def test_custom_encoding(self):
        extracted = PlainTextExtractor(encoding="latin-1").extract_bytes(b"caf\xe9", "letter.txt")
        assert extracted.text == "café"

    def test_extract_bytes_checks_filename(self):
        with pytest.raises(UnsupportedFormatError):
            PlainTextExtractor().extract_bytes(b"text", "letter.docx")
