"""Pydantic data models for decision-audit.

Every result model is frozen and uses tuples for ordered sequences, so a
``ParseResult`` or ``Fingerprint`` cannot change after it is assembled.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# ── Enums ────────────────────────────────────────────────────────────


class ConfidenceLevel(str, Enum):
    """Coarse three-way confidence used by the parser and the fingerprint."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _CONFIDENCE_RANK[self]


_CONFIDENCE_RANK = {
    ConfidenceLevel.LOW: 0,
    ConfidenceLevel.MEDIUM: 1,
    ConfidenceLevel.HIGH: 2,
}


class SectionName(str, Enum):
    """Canonical headings recognized in a decision letter."""

    DECISION = "decision"
    EVIDENCE = "evidence"
    REASONS = "reasons"
    REFERENCES = "references"


# ── Collaborator input ───────────────────────────────────────────────


class ExtractedText(BaseModel):
    """Output of the text-extraction collaborator (PDF, OCR or plain text)."""

    model_config = ConfigDict(frozen=True)

    text: str
    page_count: int = Field(default=1, ge=0)
    had_selectable_text: bool = True


# ── Parse result ─────────────────────────────────────────────────────


class ClaimRecord(BaseModel):
    """One adjudicated condition found in the letter."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    rating_percent: Optional[int] = Field(default=None, ge=0, le=100)
    diagnostic_code: Optional[str] = None
    # Date exactly as written; not normalized across records
    effective_date: Optional[str] = None
    rationale_snippet: str = ""


class DocumentSections(BaseModel):
    """Named slices of the normalized text plus the full text itself."""

    model_config = ConfigDict(frozen=True)

    full: str = ""
    decision: Optional[str] = None
    evidence: Optional[str] = None
    reasons: Optional[str] = None
    references: Optional[str] = None

    def get(self, name: SectionName) -> Optional[str]:
        return getattr(self, name.value)

    @property
    def found(self) -> tuple[SectionName, ...]:
        """Canonical names of the slices present, in enum order."""
        return tuple(n for n in SectionName if self.get(n) is not None)


class DocumentFacts(BaseModel):
    """Document-level facts; one per parse."""

    model_config = ConfigDict(frozen=True)

    combined_rating_stated: Optional[int] = Field(default=None, ge=0, le=100)
    effective_dates: tuple[str, ...] = ()
    diagnostic_codes: tuple[str, ...] = ()
    sections: DocumentSections = Field(default_factory=DocumentSections)


class ParseResult(BaseModel):
    """Everything the parser found, with its own extraction confidence."""

    model_config = ConfigDict(frozen=True)

    claims: tuple[ClaimRecord, ...] = ()
    facts: DocumentFacts = Field(default_factory=DocumentFacts)
    extraction_confidence: ConfidenceLevel = ConfidenceLevel.LOW


# ── Fingerprint ──────────────────────────────────────────────────────


class Fingerprint(BaseModel):
    """Answer to "does this look like a decision letter at all?".

    ``score`` is the plain sum of fired signal weights and can reach 115.
    """

    model_config = ConfigDict(frozen=True)

    looks_like_target: bool = False
    score: int = Field(default=0, ge=0)
    confidence: ConfidenceLevel = ConfidenceLevel.LOW
    signals: tuple[str, ...] = ()
