"""Tests for loading extra terms from YAML."""

import pytest

from greenclaims.errors import TermLoadError
from greenclaims.scanner import scan
from greenclaims.terms import load_terms_from_yaml


VALID_TERMS = """
- term: plastikfrei
  regex: '\\bplastikfrei(?:e[mnrs]?)?\\b'
  language: de
  category: resources
  severity: warning
  regulation: EU 2024/825 Art. 4.1
  description: Plastikfreiheit erfordert Nachweis über die gesamte Lieferkette
  alternatives:
    - Verpackung zu X% aus Papier
- term: ocean friendly
  regex: '\\bocean\\s*-?\\s*friendly\\b'
  language: en
  category: general
  severity: critical
  regulation: EU 2024/825 Art. 3.2
  description: Generic ocean claims need proof
  penalty_range: case by case
"""


def _write(tmp_path, content, name="terms.yaml"):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return str(path)


class TestYAMLTerms:
    """Extra corpus entries from a YAML file."""

    def test_load_from_explicit_path(self, tmp_path):
        """Terms load in file order with their optional fields."""
        terms = load_terms_from_yaml(_write(tmp_path, VALID_TERMS))
        assert [t.term for t in terms] == ["plastikfrei", "ocean friendly"]
        first, second = terms
        assert first.alternatives == ("Verpackung zu X% aus Papier",)
        assert first.penalty_range == "2-4% des Jahresumsatzes"
        assert second.penalty_range == "case by case"
        assert second.alternatives == ()

    def test_load_from_environment(self, tmp_path, monkeypatch):
        """GREENCLAIMS_TERMS points at the file to read."""
        monkeypatch.setenv("GREENCLAIMS_TERMS", _write(tmp_path, VALID_TERMS))
        assert len(load_terms_from_yaml()) == 2

    def test_no_path_and_no_environment(self, monkeypatch):
        """Without a path nothing is loaded."""
        monkeypatch.delenv("GREENCLAIMS_TERMS", raising=False)
        assert load_terms_from_yaml() == []

    def test_missing_file_is_skipped(self, tmp_path, caplog):
        """A missing file is logged and yields no terms."""
        with caplog.at_level("WARNING", logger="greenclaims.terms"):
            assert load_terms_from_yaml(str(tmp_path / "nope.yaml")) == []
        assert "not found" in caplog.text

    def test_empty_file_gives_no_terms(self, tmp_path):
        """An empty file yields no terms."""
        assert load_terms_from_yaml(_write(tmp_path, "")) == []

    def test_loaded_terms_are_scannable(self, tmp_path):
        """Loaded terms work as a scan corpus."""
        extra = load_terms_from_yaml(_write(tmp_path, VALID_TERMS))
        result = scan("Plastikfreie, ocean-friendly Flaschen", extra)
        assert [m.term.term for m in result.findings.critical] == ["ocean friendly"]
        assert [m.match_text for m in result.findings.warnings] == ["Plastikfreie"]
        assert result.risk_score == 40

    @pytest.mark.parametrize("content, message", [
        ("term: x\n", "expected a list"),
        ("- just a string\n", "not a mapping"),
        ("- term: x\n  regex: x\n", "missing"),
        ("- [unbalanced\n", "Invalid YAML"),
    ])
    def test_malformed_files_raise(self, tmp_path, content, message):
        """Structural problems raise TermLoadError."""
        with pytest.raises(TermLoadError, match=message):
            load_terms_from_yaml(_write(tmp_path, content))

    def test_unknown_key_raises(self, tmp_path):
        """Unknown entry keys are rejected."""
        content = VALID_TERMS + "  weight: 5\n"
        with pytest.raises(TermLoadError, match="unknown keys"):
            load_terms_from_yaml(_write(tmp_path, content))

    @pytest.mark.parametrize("old, new", [
        ("severity: warning", "severity: fatal"),
        ("language: de", "language: fr"),
        ("'\\bplastikfrei(?:e[mnrs]?)?\\b'", "'(unclosed'"),
    ])
    def test_invalid_values_raise(self, tmp_path, old, new):
        """Bad enumerations and regexes name the entry."""
        content = VALID_TERMS.replace(old, new, 1)
        assert content != VALID_TERMS
        with pytest.raises(TermLoadError, match="plastikfrei"):
            load_terms_from_yaml(_write(tmp_path, content))

    def test_lone_alternative_string_is_one_entry(self, tmp_path):
        """A single alternative given as a string stays whole."""
        content = VALID_TERMS.replace(
            "  alternatives:\n    - Verpackung zu X% aus Papier",
            "  alternatives: Verpackung zu X% aus Papier",
        )
        assert content != VALID_TERMS
        first = load_terms_from_yaml(_write(tmp_path, content))[0]
        assert first.alternatives == ("Verpackung zu X% aus Papier",)

    def test_alternatives_mapping_raises(self, tmp_path):
        """alternatives must be a list or a single string."""
        content = VALID_TERMS.replace(
            "  alternatives:\n    - Verpackung zu X% aus Papier",
            "  alternatives: {use: Papier}",
        )
        assert content != VALID_TERMS
        with pytest.raises(TermLoadError, match="alternatives must be a list"):
            load_terms_from_yaml(_write(tmp_path, content))

    def test_load_error_is_a_value_error(self, tmp_path):
        """TermLoadError can be caught as ValueError."""
        with pytest.raises(ValueError):
            load_terms_from_yaml(_write(tmp_path, "42\n"))
