"""Whitespace canonicalization applied before any pattern runs."""

from __future__ import annotations

import re

_CARRIAGE_RETURN = re.compile(r"\r\n?")
_HORIZONTAL_RUN = re.compile(r"[ \t\f\v]+")
_BLANK_LINE_RUN = re.compile(r"\n{3,}")
_LINE_SPLIT = re.compile(r"\n+")


def normalize_text(text: str) -> str:
    """Canonicalize line endings and whitespace runs.

    CR and CRLF become LF, runs of spaces/tabs collapse to one space,
    three or more newlines collapse to two, and the result is trimmed.
    Idempotent.
    """
    if not text:
        return ""
    out = _CARRIAGE_RETURN.sub("\n", text)
    out = _HORIZONTAL_RUN.sub(" ", out)
    out = _BLANK_LINE_RUN.sub("\n\n", out)
    return out.strip()


def to_lines(text: str) -> list[str]:
    """Split on newline runs, dropping blank lines."""
    return [line for line in _LINE_SPLIT.split(text) if line.strip()]
