"""JSON output formatter for parse results, fingerprints and reports."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel


class JSONFormatter:
    """Renders result models as indented JSON bytes.

    Output is stable for identical input: enum values, tuples as lists,
    insertion-ordered keys.
    """

    def __init__(self, indent: int = 2) -> None:
        self._indent = indent

    def format(self, report: BaseModel, **kwargs: Any) -> bytes:
        """Serialize *report* to pretty-printed JSON bytes."""
        exclude = kwargs.get("exclude")
        data = report.model_dump(mode="json", exclude=exclude)
        return json.dumps(data, indent=self._indent, ensure_ascii=False).encode("utf-8")

    def format_to_file(self, report: BaseModel, path: Path, **kwargs: Any) -> Path:
        """Write JSON to *path* and return it."""
        path.write_bytes(self.format(report, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "application/json"
