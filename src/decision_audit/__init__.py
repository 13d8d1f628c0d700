"""decision-audit: deterministic fact extraction and fingerprinting for decision letters.

Core API::

    from decision_audit import parse, classify

    result = parse(text)               # ParseResult
    fingerprint = classify(text, result)  # Fingerprint

Both calls are pure and never raise; weak or foreign input shows up as
``low`` confidence and ``looks_like_target=False``.
"""

from __future__ import annotations

from decision_audit.analysis import (
    AnalysisPayload,
    AnalysisReport,
    AnalysisService,
    GateDecision,
    build_analysis_payload,
    evaluate_gate,
)
from decision_audit.core.config import AnalysisConfig, AppSettings
from decision_audit.exceptions import (
    ConfigurationError,
    DecisionAuditError,
    TextExtractionError,
    UnsupportedFormatError,
)
from decision_audit.fingerprint import classify
from decision_audit.models import (
    ClaimRecord,
    ConfidenceLevel,
    DocumentFacts,
    DocumentSections,
    ExtractedText,
    Fingerprint,
    ParseResult,
    SectionName,
)
from decision_audit.parsing import normalize_text, parse

__all__ = [
    # Core
    "parse",
    "classify",
    "normalize_text",
    # Models
    "ClaimRecord",
    "ConfidenceLevel",
    "DocumentFacts",
    "DocumentSections",
    "ExtractedText",
    "Fingerprint",
    "ParseResult",
    "SectionName",
    # Calling layer
    "AnalysisConfig",
    "AnalysisPayload",
    "AnalysisReport",
    "AnalysisService",
    "AppSettings",
    "GateDecision",
    "build_analysis_payload",
    "evaluate_gate",
    # Errors
    "DecisionAuditError",
    "TextExtractionError",
    "UnsupportedFormatError",
    "ConfigurationError",
]
