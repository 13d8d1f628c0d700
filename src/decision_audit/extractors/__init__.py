"""Text extractors for source files."""

from __future__ import annotations

from decision_audit.extractors.plain_text import PlainTextExtractor

__all__ = ["PlainTextExtractor"]
