"""Tests for the command line interface."""

import json
import subprocess
import sys
from pathlib import Path

import pytest

from greenclaims.__main__ import main

REPO_ROOT = Path(__file__).parent.parent


def _run(*args, input=None):
    return subprocess.run(
        [sys.executable, "-m", "greenclaims", *args],
        input=input,
        stdin=subprocess.DEVNULL if input is None else None,
        capture_output=True, text=True, encoding="utf-8", cwd=REPO_ROOT,
    )


class TestCLICommands:
    """Subcommands and their arguments."""

    def test_cli_help_shows_subcommands(self):
        """Top-level help lists both subcommands."""
        result = _run("--help")
        assert result.returncode == 0
        assert "scan" in result.stdout
        assert "terms" in result.stdout
        assert "Green Claims Scanner CLI" in result.stdout

    def test_scan_help(self):
        """scan help lists its input and output options."""
        result = _run("scan", "--help")
        assert result.returncode == 0
        for option in ("--text", "--sample", "--json", "--legacy", "--highlight", "--config", "--verbose"):
            assert option in result.stdout

    def test_cli_requires_subcommand(self):
        """Calling without a subcommand is a usage error."""
        result = _run()
        assert result.returncode != 0
        assert "required" in result.stderr.lower() or "choose from" in result.stderr.lower()

    def test_scan_without_input_fails(self):
        """scan with nothing to read exits with status 2."""
        result = _run("scan")
        assert result.returncode == 2
        assert "no input" in result.stderr


class TestScanCommand:

    def test_json_output(self, capsys, monkeypatch):
        """--json prints the severity-grouped result."""
        monkeypatch.delenv("GREENCLAIMS_CONFIG", raising=False)
        assert main(["scan", "--text", "Unser klimaneutrales Produkt ist 100% umweltfreundlich.", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["riskScore"] == 70
        assert data["riskLevel"] == "high"
        assert data["summary"]["estimatedPenalty"] == "€10,000 - €50,000"
        assert len(data["findings"]["critical"]) == 2

    def test_legacy_json_output(self, capsys, monkeypatch):
        """--json --legacy prints the per-term shape."""
        monkeypatch.delenv("GREENCLAIMS_CONFIG", raising=False)
        assert main(["scan", "--sample", "medium_risk", "--json", "--legacy"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["score"] == 30
        assert data["warningCount"] == 3
        assert [f["term"] for f in data["findings"]] == ["umweltfreundlich", "nachhaltig", "öko"]

    def test_report_output(self, capsys, monkeypatch):
        """The default output is the text report with a penalty line."""
        monkeypatch.delenv("GREENCLAIMS_CONFIG", raising=False)
        assert main(["scan", "--sample", "high_risk"]) == 0
        out = capsys.readouterr().out
        assert "Risk score: 100/100 (Critical Risk)" in out
        assert "Estimated penalty: €50,000 - €200,000" in out

    def test_low_risk_report(self, capsys, monkeypatch):
        """A clean text reports no regulated terms."""
        monkeypatch.delenv("GREENCLAIMS_CONFIG", raising=False)
        assert main(["scan", "--sample", "low_risk"]) == 0
        assert "No regulated terms found." in capsys.readouterr().out

    def test_highlight_output(self, capsys, monkeypatch):
        """--highlight prints escaped HTML with marks."""
        monkeypatch.delenv("GREENCLAIMS_CONFIG", raising=False)
        assert main(["scan", "--text", "a <b> carbon neutral", "--highlight"]) == 0
        out = capsys.readouterr().out.strip()
        assert out == 'a &lt;b&gt; <mark class="gc-critical">carbon neutral</mark>'

    def test_scan_file(self, tmp_path, capsys, monkeypatch):
        """A file argument is read and line numbers refer to it."""
        monkeypatch.delenv("GREENCLAIMS_CONFIG", raising=False)
        path = tmp_path / "page.txt"
        path.write_text("Intro\nWe are climate neutral.\n", encoding="utf-8")
        assert main(["scan", str(path), "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["findings"]["critical"][0]["lineNumber"] == 2

    def test_input_is_truncated_to_config_limit(self, tmp_path, capsys):
        """Input beyond max_input_chars is cut before scanning."""
        config = tmp_path / "greenclaims.yaml"
        config.write_text("max_input_chars: 20\n", encoding="utf-8")
        text = "x" * 30 + " klimaneutral"
        assert main(["scan", "--text", text, "--json", "--config", str(config)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["inputText"] == "x" * 20
        assert data["riskScore"] == 0

    @pytest.mark.integration
    def test_stdin_input(self):
        """Piped text is scanned when no other input is given."""
        result = _run("scan", "--json", input="We are carbon neutral")
        assert result.returncode == 0
        assert json.loads(result.stdout)["riskScore"] == 30


class TestTermsCommand:

    def test_terms_json(self, capsys):
        """terms --json honours the severity and language filters."""
        assert main(["terms", "--severity", "critical", "--language", "en", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert len(data) == 16
        assert {d["severity"] for d in data} == {"critical"}
        assert data[0]["term"] == "carbon neutral"

    def test_terms_table(self, capsys):
        """The table lists one term per line in corpus order."""
        assert main(["terms", "--category", "resources"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 2
        assert lines[0].split()[-1] == "wassersparend"

    def test_terms_rejects_unknown_severity(self):
        """Unknown filter values are rejected by argparse."""
        with pytest.raises(SystemExit) as exc:
            main(["terms", "--severity", "fatal"])
        assert exc.value.code == 2
