"""Exception hierarchy for decision-audit.

The parsing and fingerprinting core never raises; these cover the layers
around it (text extraction, configuration, HTTP surface).
"""


class DecisionAuditError(Exception):
    """Base exception for all decision-audit errors."""


class TextExtractionError(DecisionAuditError):
    """Raised when a source file cannot be turned into text."""


class UnsupportedFormatError(TextExtractionError):
    """Raised when no extractor handles the given file type."""

    def __init__(self, message: str, suffix: str = "") -> None:
        super().__init__(message)
        self.suffix = suffix


class ConfigurationError(DecisionAuditError, ValueError):
    """Raised at startup when settings are unusable."""
