"""Tests for settings defaults, env overrides and startup checks."""

from __future__ import annotations

import logging

import pytest

from decision_audit.core.config import AnalysisConfig, APIConfig, AppSettings, ObservabilityConfig
from decision_audit.core.startup_checks import validate_settings
from decision_audit.exceptions import ConfigurationError
from decision_audit.models import ConfidenceLevel


class TestAnalysisConfig:
    def test_defaults(self):
        config = AnalysisConfig()
        assert config.enable_ai is False
        assert config.require_consent is True
        assert config.min_fingerprint_confidence == ConfidenceLevel.MEDIUM
        assert config.max_input_chars == 20_000

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("AUDIT_ANALYSIS_ENABLE_AI", "true")
        monkeypatch.setenv("AUDIT_ANALYSIS_MIN_FINGERPRINT_CONFIDENCE", "high")
        config = AnalysisConfig()
        assert config.enable_ai is True
        assert config.min_fingerprint_confidence == ConfidenceLevel.HIGH


class TestAppSettings:
    def test_nested_groups_read_env(self, monkeypatch):
        monkeypatch.setenv("AUDIT_OBSERVABILITY_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("AUDIT_API_MAX_TEXT_CHARS", "1000")
        settings = AppSettings()
        assert settings.observability.log_level == "DEBUG"
        assert settings.api.max_text_chars == 1000

    def test_api_limit_must_be_positive(self):
        with pytest.raises(ValueError):
            APIConfig(max_text_chars=0)


class TestValidateSettings:
    def test_defaults_pass(self):
        validate_settings(AppSettings())

    def test_rejects_unknown_log_level(self):
        settings = AppSettings(observability=ObservabilityConfig(log_level="LOUD"))
        with pytest.raises(ConfigurationError, match="AUDIT_OBSERVABILITY_LOG_LEVEL"):
            validate_settings(settings)

    def test_log_level_case_insensitive(self):
        validate_settings(AppSettings(observability=ObservabilityConfig(log_level="debug")))

    def test_rejects_non_positive_input_cap(self):
        settings = AppSettings(analysis=AnalysisConfig(max_input_chars=0))
        with pytest.raises(ValueError, match="AUDIT_ANALYSIS_MAX_INPUT_CHARS"):
            validate_settings(settings)

    def test_warns_when_consent_not_enforced(self, caplog):
        settings = AppSettings(analysis=AnalysisConfig(enable_ai=True, require_consent=False))
        with caplog.at_level(logging.WARNING, logger="decision_audit"):
            validate_settings(settings)
        assert "REQUIRE_CONSENT=false" in caplog.text


class TestSetupLogging:
    def test_installs_structlog_formatter(self):
        import structlog

        from decision_audit.core.logging_config import setup_logging

        setup_logging(ObservabilityConfig(log_level="debug"))
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
        assert logging.getLogger("decision_audit").level == logging.DEBUG

    def test_json_output_carries_service(self):
        import json

        from decision_audit.core.logging_config import setup_logging

        setup_logging(ObservabilityConfig(service_name="audit-tests", json_logs=True))
        formatter = logging.getLogger().handlers[0].formatter
        record = logging.LogRecord("decision_audit.parsing", logging.INFO, __file__, 1, "parsed", None, None)
        line = json.loads(formatter.format(record))
        assert line["event"] == "parsed"
        assert line["service"] == "audit-tests"
        assert line["level"] == "info"

    def test_json_logs_from_env(self, monkeypatch):
        monkeypatch.setenv("AUDIT_OBSERVABILITY_JSON_LOGS", "false")
        assert ObservabilityConfig().json_logs is False


class TestRedactDocumentText:
    def test_text_fields_replaced_by_length(self):
        from decision_audit.core.logging_config import redact_document_text

        event = {"event": "analyzed", "raw_text": "Service connection for tinnitus", "claims": 1}
        out = redact_document_text(None, "info", event)
        assert out == {"event": "analyzed", "raw_text": "<31 chars>", "claims": 1}

    def test_non_string_values_kept(self):
        from decision_audit.core.logging_config import redact_document_text

        assert redact_document_text(None, "info", {"text": None}) == {"text": None}
