"""Startup validation: fail-fast on critical misconfigurations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from decision_audit.exceptions import ConfigurationError

if TYPE_CHECKING:
    from decision_audit.core.config import AppSettings

log = logging.getLogger(__name__)

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


def validate_settings(settings: AppSettings) -> None:
    """Validate application settings at startup. Raises ConfigurationError on fatal misconfig."""
    _check_log_level(settings)
    _check_limits(settings)
    _check_consent(settings)


def _check_log_level(settings: AppSettings) -> None:
    level = settings.observability.log_level.upper()
    if level not in _LOG_LEVELS:
        raise ConfigurationError(
            f"AUDIT_OBSERVABILITY_LOG_LEVEL={settings.observability.log_level!r} is not a "
            f"log level. Use one of: {', '.join(sorted(_LOG_LEVELS))}."
        )


def _check_limits(settings: AppSettings) -> None:
    if settings.analysis.max_input_chars <= 0:
        raise ConfigurationError("AUDIT_ANALYSIS_MAX_INPUT_CHARS must be positive.")


def _check_consent(settings: AppSettings) -> None:
    """Warn when AI hand-off is on but user consent is not enforced."""
    if settings.analysis.enable_ai and not settings.analysis.require_consent:
        log.warning(
            "AUDIT_ANALYSIS_ENABLE_AI=true with AUDIT_ANALYSIS_REQUIRE_CONSENT=false. "
            "Letter text will be handed to the summarizer without user consent."
        )
