"""Tests for the plain-text report."""

from datetime import datetime, timezone

from greenclaims.legacy import scan_legacy
from greenclaims.models import ScanResponse
from greenclaims.report import render_report


def _empty_response():
    return ScanResponse(
        score=0,
        findings=[],
        timestamp=datetime(2026, 1, 2, 3, 4, tzinfo=timezone.utc),
        total_matches=0,
        critical_count=0,
        warning_count=0,
        minor_count=0,
    )


class TestRenderReport:

    def test_header_and_empty_body(self):
        """Header lines are present and an empty scan says so."""
        report = render_report(_empty_response())
        assert "Green Claims Compliance Report" in report
        assert "Generated: 2026-01-02 03:04 UTC" in report
        assert "Risk score: 0/100 (Low Risk)" in report
        assert "Findings: 0 (critical 0, warning 0, minor 0)" in report
        assert "No regulated terms found." in report
        assert "Estimated penalty" not in report
        assert report.endswith("\n")

    def test_penalty_line_is_optional(self):
        """The penalty line appears only when an estimate is passed."""
        report = render_report(_empty_response(), estimated_penalty="No risk")
        assert "Estimated penalty: No risk" in report

    def test_findings_are_numbered(self, tiny_corpus):
        """Findings are numbered with their details and matches."""
        response = scan_legacy("crit warn\ncrit", tiny_corpus)
        report = render_report(response)
        assert "Risk score: 70/100 (High Risk)" in report
        assert "1. crit [CRITICAL]" in report
        assert "2. warn [WARNING]" in report
        assert "   Regulation:    TEST Art. 1" in report
        assert "   - line 1: crit warn crit" in report
        assert "   - line 2: crit warn crit" in report
        assert "     * instead of crit" in report
        assert "No regulated terms found." not in report

    def test_real_corpus_report(self, samples):
        """A report on the high-risk sample shows critical findings."""
        report = render_report(scan_legacy(samples["high_risk"]))
        assert "Risk score: 100/100 (Critical Risk)" in report
        assert "klimaneutral [CRITICAL]" in report
        assert "EU 2024/825 Art. 3.1" in report
