"""Parse and analyze endpoints.

Both are thin wrappers over the pure core; the request carries text the
caller already extracted.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field

from decision_audit.analysis.service import AnalysisReport, AnalysisService
from decision_audit.core.config import AppSettings
from decision_audit.extractors.plain_text import PlainTextExtractor
from decision_audit.models import ExtractedText, ParseResult
from decision_audit.parsing.parser import parse as parse_text

router = APIRouter(tags=["analysis"])


class ParseRequest(BaseModel):
    """Text of a decision letter."""

    text: str = ""


class AnalyzeRequest(BaseModel):
    """Extracted letter text plus the caller's consent choice."""

    text: str = ""
    page_count: int = Field(default=1, ge=0)
    had_selectable_text: bool = True
    consent: bool = False


def _check_size(text: str, settings: AppSettings) -> None:
    limit = settings.api.max_text_chars
    if len(text) > limit:
        raise HTTPException(
            status_code=413,
            detail=f"Text is {len(text)} characters; limit is {limit}.",
        )


@router.post("/parse", response_model=ParseResult)
async def parse(request: ParseRequest, req: Request) -> ParseResult:
    """Extract claims and document facts."""
    _check_size(request.text, req.app.state.settings)
    return parse_text(request.text)


@router.post("/analyze", response_model=AnalysisReport)
async def analyze(request: AnalyzeRequest, req: Request) -> AnalysisReport:
    """Parse, fingerprint and gate a letter."""
    settings: AppSettings = req.app.state.settings
    _check_size(request.text, settings)

    extracted = ExtractedText(
        text=request.text,
        page_count=request.page_count,
        had_selectable_text=request.had_selectable_text,
    )
    return AnalysisService(settings.analysis).analyze(extracted, consent=request.consent)


@router.post("/analyze/file", response_model=AnalysisReport)
async def analyze_file(
    req: Request,
    filename: str,
    consent: bool = False,
) -> AnalysisReport:
    """Analyze a raw file body; only plain-text letters are read here."""
    settings: AppSettings = req.app.state.settings
    extracted = PlainTextExtractor().extract_bytes(await req.body(), filename)
    _check_size(extracted.text, settings)
    return AnalysisService(settings.analysis).analyze(extracted, consent=consent)
