# scanner.py
"""Scan marketing text for regulated green-claim terms.

:func:`scan` runs every term pattern of a corpus over the input, records
each non-overlapping match with its line number and a context snippet,
groups the matches by severity and derives a risk score and a penalty
estimate from the group sizes.

The scan is a pure function of ``(text, corpus)``.  The built-in corpus
is immutable module data, so concurrent callers need no coordination.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Optional

from .errors import InvalidInputError
from .models import Findings, ScanMatch, ScanResult, Summary
from .scoring import (  # noqa: F401  re-exported for callers of the scanner
    MAX_RISK_SCORE,
    NO_RISK_PENALTY,
    SEVERITY_WEIGHTS,
    calculate_risk_score,
    estimate_penalty,
    risk_level,
)
from .terms import BANNED_TERMS, TermDefinition

logger = logging.getLogger(__name__)

CONTEXT_CHARS = 50
ELLIPSIS = "..."

# severity -> attribute of Findings
SEVERITY_BUCKETS = {
    "critical": "critical",
    "warning": "warnings",
    "minor": "minor",
}


@dataclass
class TermOutcome:
    """Result of evaluating a single term: its matches, or the error it raised."""

    term: TermDefinition
    matches: list[ScanMatch] = field(default_factory=list)
    error: Optional[Exception] = None


def extract_context(text: str, position: int, length: int, window: int = CONTEXT_CHARS) -> str:
    """Return up to ``window`` characters on either side of a match.

    ``"..."`` marks each side where the snippet does not reach the text
    boundary.
    """
    start = max(0, position - window)
    end = min(len(text), position + length + window)
    context = text[start:end]
    if start > 0:
        context = ELLIPSIS + context
    if end < len(text):
        context = context + ELLIPSIS
    return context


def line_number_at(text: str, position: int) -> int:
    return text.count("\n", 0, position) + 1


def empty_result(input_text: str = "") -> ScanResult:
    """The all-zero result used for empty input and degraded scans."""
    return ScanResult(
        input_text=input_text,
        timestamp=datetime.now(timezone.utc),
        risk_score=0,
        findings=Findings(),
        summary=Summary(total_findings=0, unique_terms=0, estimated_penalty=NO_RISK_PENALTY),
    )


def evaluate_term(term: TermDefinition, text: str, context_chars: int = CONTEXT_CHARS) -> TermOutcome:
    """Collect all matches of one term.  Never raises."""
    try:
        if term.severity not in SEVERITY_BUCKETS:
            raise ValueError(f"unknown severity {term.severity!r}")
        matches = [
            ScanMatch(
                term=term,
                match_text=m.group(0),
                position=m.start(),
                line_number=line_number_at(text, m.start()),
                context=extract_context(text, m.start(), len(m.group(0)), context_chars),
            )
            for m in term.pattern.finditer(text)
            # a zero-width hit carries no claim text
            if m.end() > m.start()
        ]
    except Exception as e:
        return TermOutcome(term=term, error=e)
    return TermOutcome(term=term, matches=matches)


def _build_result(input_text: str, findings: Findings) -> ScanResult:
    critical, warnings, minor = findings.counts()
    unique_terms = len({m.term.term for m in findings.all()})
    return ScanResult(
        input_text=input_text,
        timestamp=datetime.now(timezone.utc),
        risk_score=calculate_risk_score(critical, warnings, minor),
        findings=findings,
        summary=Summary(
            total_findings=critical + warnings + minor,
            unique_terms=unique_terms,
            estimated_penalty=estimate_penalty(critical),
        ),
    )


def scan(
    input_text: str,
    terms: Optional[Iterable[TermDefinition]] = None,
    *,
    context_chars: int = CONTEXT_CHARS,
) -> ScanResult:
    """Scan ``input_text`` against a term corpus.

    Parameters
    ----------
    input_text : str
        Text to check.  The empty string is valid and yields the empty
        result.
    terms : iterable of TermDefinition, optional
        Corpus to scan with.  Defaults to :data:`greenclaims.terms.BANNED_TERMS`.
    context_chars : int
        Size of the context window on each side of a match.

    Returns
    -------
    ScanResult
        Matches grouped by severity, in corpus order and then by position.
        A term whose pattern fails is logged and skipped; any other
        failure yields the empty result.

    Raises
    ------
    InvalidInputError
        If ``input_text`` is not a string.
    """
    if not isinstance(input_text, str):
        raise InvalidInputError(f"input_text must be str, got {type(input_text).__name__}")
    if not input_text:
        return empty_result(input_text)

    corpus = BANNED_TERMS if terms is None else terms
    try:
        buckets: dict[str, list[ScanMatch]] = {name: [] for name in SEVERITY_BUCKETS.values()}
        for term in corpus:
            outcome = evaluate_term(term, input_text, context_chars)
            if outcome.error is not None:
                logger.warning(f"Skipping term {getattr(term, 'term', term)!r}: {outcome.error}")
                continue
            buckets[SEVERITY_BUCKETS[term.severity]].extend(outcome.matches)
        findings = Findings(**buckets)
        result = _build_result(input_text, findings)
    except Exception:
        logger.exception("Scan failed, returning empty result")
        return empty_result(input_text)

    logger.debug(
        f"Scanned {len(input_text)} chars: score={result.risk_score} "
        f"findings={result.summary.total_findings}"
    )
    return result
