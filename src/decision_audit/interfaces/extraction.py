"""Abstract text-extraction provider.

Implementations turn a source file into page-ordered text. The parsing
core consumes only ``ExtractedText.text``; page markers such as
``--- Page N ---`` are tolerated there but never required.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from decision_audit.models import ExtractedText


class ITextExtractor(ABC):
    @abstractmethod
    def supports(self, path: Path) -> bool:
        """Return True when this extractor can read *path*."""

    @abstractmethod
    def extract(self, path: Path) -> ExtractedText:
        """Read *path* and return its text, page count and text flag."""
