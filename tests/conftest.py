"""Shared fixtures for decision-audit tests."""

from __future__ import annotations

import logging

import pytest
import structlog

from decision_audit.core.config import AnalysisConfig

SAMPLE_LETTER = """\
DEPARTMENT OF VETERANS AFFAIRS
Regional Office

Dear Veteran:

We made a decision on your claim for service connection.

Decision
1. Service connection for tinnitus is granted with an evaluation of 10 percent, effective date of January 5, 2020.
Diagnostic code 6260.
2. A 70 percent evaluation is assigned for post-traumatic stress disorder (also claimed as anxiety), effective 2020-03-01.
Diagnostic Code 9411.
3. Service connection for bilateral hearing loss is denied.

Evidence
VA examination dated February 2, 2020
Service treatment records

Reasons for Decision
For lumbosacral strain, a 20 percent evaluation is assigned.
Diagnostic code 5237 applies. The evidence shows forward flexion limited to 50 degrees.
The combined evaluation is 80 percent.

References
Title 38 Code of Federal Regulations, Part 4

Page 1 of 3
"""

MINIMAL_LETTER = """\
Decision
service connection for tinnitus is granted
diagnostic code 6260
effective date of January 5, 2020
"""


@pytest.fixture(autouse=True)
def _restore_logging():
    """Drop the handler setup_logging() installs so later tests log normally."""
    root = logging.getLogger()
    level = root.level
    package_level = logging.getLogger("decision_audit").level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
    logging.getLogger("decision_audit").setLevel(package_level)


@pytest.fixture
def sample_letter() -> str:
    """Four-condition letter with every section and most fingerprint signals."""
    return SAMPLE_LETTER


@pytest.fixture
def minimal_letter() -> str:
    return MINIMAL_LETTER


@pytest.fixture
def open_config() -> AnalysisConfig:
    """Analysis config with the AI hand-off switched on."""
    return AnalysisConfig(enable_ai=True, require_consent=True)
