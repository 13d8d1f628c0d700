"""Tests for the JSONFormatter."""

from __future__ import annotations

import json

from decision_audit.analysis.service import AnalysisService
from decision_audit.formatters.json_formatter import JSONFormatter
from decision_audit.formatters.protocols import IOutputFormatter
from decision_audit.models import ClaimRecord, DocumentFacts, DocumentSections, ParseResult
from decision_audit.parsing.parser import parse


class TestJSONFormatter:
    def test_satisfies_protocol(self):
        assert isinstance(JSONFormatter(), IOutputFormatter)

    def test_format_returns_bytes(self, minimal_letter):
        assert isinstance(JSONFormatter().format(parse(minimal_letter)), bytes)

    def test_parse_result_fields(self, minimal_letter):
        data = json.loads(JSONFormatter().format(parse(minimal_letter)))
        assert data["extraction_confidence"] == "medium"
        assert data["claims"][0]["name"] == "tinnitus"
        assert data["claims"][0]["rating_percent"] is None
        assert data["facts"]["diagnostic_codes"] == ["6260"]
        assert data["facts"]["sections"]["evidence"] is None

    def test_report_fields(self, sample_letter):
        report = AnalysisService().analyze_text(sample_letter)
        data = json.loads(JSONFormatter().format(report))
        assert set(data) == {"result", "fingerprint", "gate"}
        assert data["fingerprint"]["score"] == 110
        assert data["gate"]["allowed"] is False

    def test_exclude(self, minimal_letter):
        data = json.loads(JSONFormatter().format(parse(minimal_letter), exclude={"facts"}))
        assert "facts" not in data

    def test_non_ascii_kept(self):
        result = ParseResult(
            claims=(ClaimRecord(name="Ménière's disease"),),
            facts=DocumentFacts(sections=DocumentSections()),
        )
        assert "Ménière".encode("utf-8") in JSONFormatter().format(result)

    def test_stable_output(self, sample_letter):
        formatter = JSONFormatter()
        assert formatter.format(parse(sample_letter)) == formatter.format(parse(sample_letter))

    def test_format_to_file(self, tmp_path, minimal_letter):
        out = JSONFormatter(indent=4).format_to_file(parse(minimal_letter), tmp_path / "out.json")
        assert json.loads(out.read_text(encoding="utf-8"))["claims"][0]["diagnostic_code"] == "6260"

    def test_content_type(self):
        assert JSONFormatter().content_type == "application/json"
