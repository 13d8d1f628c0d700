"""Output formatters."""

from __future__ import annotations

from decision_audit.formatters.json_formatter import JSONFormatter
from decision_audit.formatters.protocols import IOutputFormatter

__all__ = ["IOutputFormatter", "JSONFormatter"]
