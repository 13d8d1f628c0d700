"""Plain-text extractor for letters already saved as ``.txt``."""

from __future__ import annotations

import logging
from pathlib import Path

from decision_audit.exceptions import TextExtractionError, UnsupportedFormatError
from decision_audit.interfaces.extraction import ITextExtractor
from decision_audit.models import ExtractedText

log = logging.getLogger(__name__)


class PlainTextExtractor(ITextExtractor):
    """Reads ``.txt`` files as a single page."""

    suffixes = frozenset({".txt", ".text"})

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def supports(self, path: Path) -> bool:
        return Path(path).suffix.lower() in self.suffixes

    def _require_supported(self, path: Path) -> None:
        if not self.supports(path):
            raise UnsupportedFormatError(
                f"{path.name}: only plain-text files are supported "
                f"({', '.join(sorted(self.suffixes))})",
                suffix=path.suffix.lower(),
            )

    def extract(self, path: Path) -> ExtractedText:
        path = Path(path)
        self._require_supported(path)
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise TextExtractionError(f"Could not read {path}: {exc}") from exc
        return self.extract_bytes(data, path.name)

    def extract_bytes(self, data: bytes, filename: str) -> ExtractedText:
        """Decode an uploaded file body; *filename* decides the format."""
        self._require_supported(Path(filename))
        text = data.decode(self._encoding, errors="replace")
        log.debug("Read %d chars from %s", len(text), filename)
        return ExtractedText(text=text, page_count=1, had_selectable_text=bool(text.strip()))
