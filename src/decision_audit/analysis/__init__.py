"""Calling-layer policy around the parsing core."""

from __future__ import annotations

from decision_audit.analysis.gate import (
    AnalysisPayload,
    GateDecision,
    build_analysis_payload,
    evaluate_gate,
)
from decision_audit.analysis.service import AnalysisReport, AnalysisService

__all__ = [
    "AnalysisPayload",
    "AnalysisReport",
    "AnalysisService",
    "GateDecision",
    "build_analysis_payload",
    "evaluate_gate",
]
