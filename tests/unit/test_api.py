"""Tests for the FastAPI surface."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from decision_audit.api.app import create_app
from decision_audit.core.config import AnalysisConfig, APIConfig, AppSettings, ObservabilityConfig
from decision_audit.exceptions import ConfigurationError


def _client(settings: AppSettings | None = None) -> TestClient:
    return TestClient(create_app(settings or AppSettings()))


class TestHealth:
    def test_health(self):
        with _client() as client:
            assert client.get("/health").json() == {"status": "ok"}

    def test_ready(self):
        with _client() as client:
            resp = client.get("/ready")
            assert resp.status_code == 200
            assert resp.json() == {"status": "ready"}


class TestParseEndpoint:
    def test_parse(self, minimal_letter):
        with _client() as client:
            resp = client.post("/api/parse", json={"text": minimal_letter})
            assert resp.status_code == 200
            body = resp.json()
            assert body["claims"][0]["name"] == "tinnitus"
            assert body["claims"][0]["diagnostic_code"] == "6260"
            assert body["extraction_confidence"] == "medium"

    def test_empty_text(self):
        with _client() as client:
            body = client.post("/api/parse", json={"text": ""}).json()
            assert body["claims"] == []
            assert body["extraction_confidence"] == "low"

    def test_text_too_large(self):
        settings = AppSettings(api=APIConfig(max_text_chars=10))
        with _client(settings) as client:
            resp = client.post("/api/parse", json={"text": "x" * 11})
            assert resp.status_code == 413


class TestAnalyzeEndpoint:
    def test_blocked_by_default(self, sample_letter):
        with _client() as client:
            resp = client.post("/api/analyze", json={"text": sample_letter, "consent": True})
            assert resp.status_code == 200
            body = resp.json()
            assert body["fingerprint"]["score"] == 110
            assert body["gate"] == {"allowed": False, "reasons": ["AI analysis is turned off."]}

    def test_allowed_when_enabled(self, sample_letter):
        settings = AppSettings(analysis=AnalysisConfig(enable_ai=True))
        with _client(settings) as client:
            body = client.post("/api/analyze", json={"text": sample_letter, "consent": True}).json()
            assert body["gate"]["allowed"] is True

    def test_no_selectable_text(self):
        settings = AppSettings(analysis=AnalysisConfig(enable_ai=True))
        payload = {"text": "", "page_count": 2, "had_selectable_text": False, "consent": True}
        with _client(settings) as client:
            reasons = client.post("/api/analyze", json=payload).json()["gate"]["reasons"]
            assert reasons[0].startswith("No readable words were found")

    def test_file_upload(self, sample_letter):
        with _client() as client:
            resp = client.post(
                "/api/analyze/file",
                params={"filename": "letter.txt"},
                content=sample_letter.encode("utf-8"),
            )
            assert resp.status_code == 200
            assert len(resp.json()["result"]["claims"]) == 4

    def test_file_upload_unsupported(self):
        with _client() as client:
            resp = client.post(
                "/api/analyze/file", params={"filename": "scan.pdf"}, content=b"%PDF-1.7"
            )
            assert resp.status_code == 415
            body = resp.json()
            assert body["type"] == "unsupported_format"
            assert body["suffix"] == ".pdf"


class TestStartup:
    def test_invalid_settings_fail_fast(self):
        settings = AppSettings(observability=ObservabilityConfig(log_level="LOUD"))
        with pytest.raises(ConfigurationError):
            with _client(settings):
                pass
