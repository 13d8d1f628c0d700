"""Output formatter protocol.

``report`` accepts any of the result models (``ParseResult``,
``Fingerprint``, ``AnalysisReport``) so implementations can type-narrow.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IOutputFormatter(Protocol):
    """Protocol for output formatters."""

    def format(self, report: Any, **kwargs: Any) -> bytes:
        """Render the report into output bytes."""
        ...

    def format_to_file(self, report: Any, path: Path, **kwargs: Any) -> Path:
        """Render and write to a file. Returns the output path."""
        ...

    @property
    def content_type(self) -> str:
        """MIME type for the output format."""
        ...


__all__ = ["IOutputFormatter"]
