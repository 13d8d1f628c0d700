"""Nested pydantic-settings configuration for the application.

Each sub-config reads its own ``AUDIT_<GROUP>_*`` env vars::

    export AUDIT_ANALYSIS_ENABLE_AI=true
    export AUDIT_OBSERVABILITY_LOG_LEVEL=DEBUG

The parsing core takes no configuration; these settings belong to the
layers that call it.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from decision_audit.models import ConfidenceLevel


class AnalysisConfig(BaseSettings):
    """Gate for handing a parsed letter to a downstream summarizer.

    Env vars use ``AUDIT_ANALYSIS_`` prefix.
    """

    model_config = {"env_prefix": "AUDIT_ANALYSIS_"}

    enable_ai: bool = False
    require_consent: bool = True
    min_fingerprint_confidence: ConfidenceLevel = ConfidenceLevel.MEDIUM
    max_input_chars: int = 20_000
    payload_source: str = "decision-audit"


class ObservabilityConfig(BaseSettings):
    """Observability configuration.

    Env vars use ``AUDIT_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "AUDIT_OBSERVABILITY_"}

    service_name: str = "decision-audit"
    log_level: str = "INFO"
    json_logs: Optional[bool] = None


class APIConfig(BaseSettings):
    """HTTP surface configuration.

    Env vars use ``AUDIT_API_`` prefix.
    """

    model_config = {"env_prefix": "AUDIT_API_"}

    title: str = "Decision Audit"
    description: str = "Fact extraction and fingerprinting for benefit decision letters"
    host: str = "0.0.0.0"
    port: int = 8080
    max_text_chars: int = Field(default=2_000_000, gt=0)


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs."""

    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    api: APIConfig = Field(default_factory=APIConfig)
