"""Configuration, startup checks and logging setup."""

from __future__ import annotations

from decision_audit.core.config import AnalysisConfig, APIConfig, AppSettings, ObservabilityConfig
from decision_audit.core.logging_config import setup_logging
from decision_audit.core.startup_checks import validate_settings

__all__ = [
    "AnalysisConfig",
    "APIConfig",
    "AppSettings",
    "ObservabilityConfig",
    "setup_logging",
    "validate_settings",
]
