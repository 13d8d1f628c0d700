"""Gate for handing a parsed letter to a downstream summarizer.

The core only reports; this layer decides. A letter is forwarded only when
it carried real text, the feature is switched on, the fingerprint says it
is the right kind of document with enough confidence, and (when required)
the user has consented to cloud processing.
"""

from __future__ import annotations

import logging
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

from decision_audit.core.config import AnalysisConfig
from decision_audit.models import ExtractedText, Fingerprint, ParseResult

log = logging.getLogger(__name__)

NO_TEXT_REASON = (
    "No readable words were found in this file. This usually happens when the letter "
    "is a photo or scan instead of real text; try a text-based copy."
)
DISABLED_REASON = "AI analysis is turned off."
NOT_TARGET_REASON = "This does not appear to be a decision letter."
LOW_CONFIDENCE_REASON = "Fingerprint confidence {actual} is below the required {required}."
NO_CONSENT_REASON = "Cloud processing has not been allowed."


class GateDecision(BaseModel):
    """Outcome of the analysis gate; ``reasons`` lists every blocking check."""

    model_config = ConfigDict(frozen=True)

    allowed: bool
    reasons: tuple[str, ...] = ()


class AnalysisPayload(BaseModel):
    """What the calling layer hands to an external summarizer."""

    model_config = ConfigDict(frozen=True)

    version: Literal["v1"] = "v1"
    source: str
    raw_text: str
    truncated: bool = False
    parsed: ParseResult


def evaluate_gate(
    fingerprint: Fingerprint,
    *,
    config: AnalysisConfig,
    consent: bool = False,
    extracted: Optional[ExtractedText] = None,
) -> GateDecision:
    """Check every condition and collect the reasons that block analysis."""
    reasons: list[str] = []

    if extracted is not None and (not extracted.had_selectable_text or not extracted.text.strip()):
        reasons.append(NO_TEXT_REASON)
    if not config.enable_ai:
        reasons.append(DISABLED_REASON)
    if not fingerprint.looks_like_target:
        reasons.append(NOT_TARGET_REASON)
    elif fingerprint.confidence.rank < config.min_fingerprint_confidence.rank:
        reasons.append(
            LOW_CONFIDENCE_REASON.format(
                actual=fingerprint.confidence.value,
                required=config.min_fingerprint_confidence.value,
            )
        )
    if config.require_consent and not consent:
        reasons.append(NO_CONSENT_REASON)

    if reasons:
        log.info("Analysis gate blocked with %d reason(s)", len(reasons))
    return GateDecision(allowed=not reasons, reasons=tuple(reasons))


def build_analysis_payload(
    raw_text: str, result: ParseResult, config: AnalysisConfig
) -> AnalysisPayload:
    """Bundle the raw text, capped at ``max_input_chars``, with the parse."""
    raw_text = raw_text or ""
    truncated = len(raw_text) > config.max_input_chars
    return AnalysisPayload(
        source=config.payload_source,
        raw_text=raw_text[: config.max_input_chars] if truncated else raw_text,
        truncated=truncated,
        parsed=result,
    )
