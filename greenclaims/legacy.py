# legacy.py
"""Per-term view of a scan result.

Older consumers (report rendering, stored history) read findings grouped
by term name instead of by severity.  :func:`to_legacy_shape` derives that
view from a :class:`~greenclaims.models.ScanResult`, so both shapes always
agree on score and counts.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .models import LegacyFinding, LegacyMatch, ScanResponse, ScanResult
from .scanner import scan
from .terms import TermDefinition


def to_legacy_shape(result: ScanResult) -> ScanResponse:
    """Regroup ``result`` by term name, keeping first-seen order."""
    by_term: dict[str, LegacyFinding] = {}
    for match in result.findings.all():
        term = match.term
        entry = by_term.get(term.term)
        if entry is None:
            entry = LegacyFinding(
                term=term.term,
                severity=term.severity,
                regulation=term.regulation,
                penalty_range=term.penalty_range,
                description=term.description,
                alternatives=list(term.alternatives),
            )
            by_term[term.term] = entry
        entry.matches.append(
            LegacyMatch(
                index=match.position,
                length=len(match.match_text),
                line=match.line_number,
                context=match.context,
            )
        )

    critical, warnings, minor = result.findings.counts()
    return ScanResponse(
        score=result.risk_score,
        findings=list(by_term.values()),
        timestamp=result.timestamp,
        total_matches=result.summary.total_findings,
        critical_count=critical,
        warning_count=warnings,
        minor_count=minor,
    )


def scan_legacy(input_text: str, terms: Optional[Iterable[TermDefinition]] = None) -> ScanResponse:
    return to_legacy_shape(scan(input_text, terms))
