"""End-to-end analysis: parse, fingerprint, then apply the gate."""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict

from decision_audit.analysis.gate import GateDecision, evaluate_gate
from decision_audit.core.config import AnalysisConfig
from decision_audit.fingerprint.classifier import classify
from decision_audit.models import ExtractedText, Fingerprint, ParseResult
from decision_audit.parsing.parser import parse

log = logging.getLogger(__name__)


class AnalysisReport(BaseModel):
    """Parse result and fingerprint side by side, plus the gate outcome."""

    model_config = ConfigDict(frozen=True)

    result: ParseResult
    fingerprint: Fingerprint
    gate: GateDecision


class AnalysisService:
    """Runs a letter through the core and the analysis gate."""

    def __init__(self, config: Optional[AnalysisConfig] = None) -> None:
        self._config = config or AnalysisConfig()

    @property
    def config(self) -> AnalysisConfig:
        return self._config

    def analyze_text(self, text: str, *, consent: bool = False) -> AnalysisReport:
        return self.analyze(ExtractedText(text=text or ""), consent=consent)

    def analyze(self, extracted: ExtractedText, *, consent: bool = False) -> AnalysisReport:
        result = parse(extracted.text)
        fingerprint = classify(extracted.text, result)
        gate = evaluate_gate(
            fingerprint, config=self._config, consent=consent, extracted=extracted
        )
        log.info(
            "Analyzed letter: claims=%d extraction=%s fingerprint=%s score=%d allowed=%s",
            len(result.claims),
            result.extraction_confidence.value,
            fingerprint.confidence.value,
            fingerprint.score,
            gate.allowed,
        )
        return AnalysisReport(result=result, fingerprint=fingerprint, gate=gate)
