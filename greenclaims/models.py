# models.py
"""Result types produced by the scanner.

Two shapes describe the same scan:

* :class:`ScanResult` groups matches by severity and is the canonical
  result of :func:`greenclaims.scanner.scan`.
* :class:`ScanResponse` groups matches by term name.  It is the legacy
  shape consumed by report renderers and is only ever derived from a
  :class:`ScanResult` (see :mod:`greenclaims.legacy`).

``to_dict`` methods emit the camelCase JSON layout expected by the HTTP
and storage collaborators.  Every value they return is plain data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterator

from .scoring import risk_level
from .terms import TermDefinition


@dataclass(frozen=True)
class ScanMatch:
    """One occurrence of one term in the scanned text."""

    term: TermDefinition
    match_text: str
    position: int      # 0-based offset into the input
    line_number: int   # 1-based
    context: str

    @property
    def severity(self) -> str:
        return self.term.severity

    @property
    def end(self) -> int:
        return self.position + len(self.match_text)

    def to_dict(self) -> dict[str, Any]:
        return {
            "term": self.term.to_dict(),
            "matchText": self.match_text,
            "position": self.position,
            "lineNumber": self.line_number,
            "context": self.context,
        }


@dataclass
class Findings:
    critical: list[ScanMatch] = field(default_factory=list)
    warnings: list[ScanMatch] = field(default_factory=list)
    minor: list[ScanMatch] = field(default_factory=list)

    def all(self) -> Iterator[ScanMatch]:
        """Iterate critical, then warnings, then minor matches."""
        yield from self.critical
        yield from self.warnings
        yield from self.minor

    def counts(self) -> tuple[int, int, int]:
        return len(self.critical), len(self.warnings), len(self.minor)

    def to_dict(self) -> dict[str, Any]:
        return {
            "critical": [m.to_dict() for m in self.critical],
            "warnings": [m.to_dict() for m in self.warnings],
            "minor": [m.to_dict() for m in self.minor],
        }


@dataclass
class Summary:
    total_findings: int
    unique_terms: int
    estimated_penalty: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalFindings": self.total_findings,
            "uniqueTerms": self.unique_terms,
            "estimatedPenalty": self.estimated_penalty,
        }


@dataclass
class ScanResult:
    """Severity-grouped scan result."""

    input_text: str
    timestamp: datetime
    risk_score: int
    findings: Findings
    summary: Summary

    @property
    def risk_level(self) -> str:
        return risk_level(self.risk_score)

    def to_dict(self) -> dict[str, Any]:
        return {
            "inputText": self.input_text,
            "timestamp": self.timestamp.isoformat(),
            "riskScore": self.risk_score,
            "riskLevel": self.risk_level,
            "findings": self.findings.to_dict(),
            "summary": self.summary.to_dict(),
        }


@dataclass
class LegacyMatch:
    index: int
    length: int
    line: int
    context: str

    def to_dict(self) -> dict[str, Any]:
        return {"index": self.index, "length": self.length, "line": self.line, "context": self.context}


@dataclass
class LegacyFinding:
    """All matches of one term, with the term's metadata carried once."""

    term: str
    severity: str
    regulation: str
    penalty_range: str
    description: str
    alternatives: list[str]
    matches: list[LegacyMatch] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "term": self.term,
            "matches": [m.to_dict() for m in self.matches],
            "severity": self.severity,
            "regulation": self.regulation,
            "penaltyRange": self.penalty_range,
            "description": self.description,
            "alternatives": list(self.alternatives),
        }


@dataclass
class ScanResponse:
    """Per-term grouped result kept for older consumers."""

    score: int
    findings: list[LegacyFinding]
    timestamp: datetime
    total_matches: int
    critical_count: int
    warning_count: int
    minor_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "findings": [f.to_dict() for f in self.findings],
            "timestamp": self.timestamp.isoformat(),
            "totalMatches": self.total_matches,
            "criticalCount": self.critical_count,
            "warningCount": self.warning_count,
            "minorCount": self.minor_count,
        }
