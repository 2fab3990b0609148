# highlight.py
"""Mark scan matches inside the original text for HTML rendering."""

from __future__ import annotations

import html
import logging
from typing import Iterable, Union

from .models import ScanMatch, ScanResult

logger = logging.getLogger(__name__)

MARK_OPEN = '<mark class="gc-{severity}">'
MARK_CLOSE = "</mark>"

# lower rank wins when two spans cross
SEVERITY_RANK = {"critical": 0, "warning": 1, "minor": 2}


def _span(m) -> tuple[int, int]:
    return m.position, m.position + len(m.match_text)


def _crosses(a: tuple[int, int], b: tuple[int, int]) -> bool:
    """True for identical spans and for partial overlaps; nesting is fine."""
    if a == b:
        return True
    return a[0] < b[0] < a[1] < b[1] or b[0] < a[0] < b[1] < a[1]


def _select(text: str, matches: Iterable) -> list:
    """Keep a set of spans that nest or are disjoint, most severe first."""
    ranked = sorted(
        matches,
        key=lambda m: (SEVERITY_RANK.get(m.severity, len(SEVERITY_RANK)), m.position, -len(m.match_text)),
    )
    kept = []
    for m in ranked:
        start, end = _span(m)
        if start < 0 or end <= start or end > len(text):
            continue
        if any(_crosses((start, end), _span(k)) for k in kept):
            continue
        kept.append(m)
    # outer spans open before the spans they enclose
    kept.sort(key=lambda m: (m.position, -len(m.match_text)))
    return kept


def highlight(text: str, matches: Union[ScanResult, Iterable[ScanMatch]]) -> str:
    """Wrap every matched substring of ``text`` in a severity-tagged ``<mark>``.

    A match lying inside another one is nested in the outer mark, so
    "100% umweltfreundlich" carries a critical mark around a warning mark.
    When two matches only partly overlap, the more severe one is marked
    (the earlier one on a tie) and the other is left out.  All literal
    text is HTML-escaped.

    On any error the original text is returned unchanged.
    """
    try:
        if isinstance(matches, ScanResult):
            matches = matches.findings.all()

        pieces: list[str] = []
        open_ends: list[int] = []
        cursor = 0
        for m in _select(text, matches):
            start, end = _span(m)
            while open_ends and open_ends[-1] <= start:
                close = open_ends.pop()
                pieces.append(html.escape(text[cursor:close]))
                pieces.append(MARK_CLOSE)
                cursor = close
            pieces.append(html.escape(text[cursor:start]))
            pieces.append(MARK_OPEN.format(severity=html.escape(m.severity, quote=True)))
            cursor = start
            open_ends.append(end)
        while open_ends:
            close = open_ends.pop()
            pieces.append(html.escape(text[cursor:close]))
            pieces.append(MARK_CLOSE)
            cursor = close
        pieces.append(html.escape(text[cursor:]))
        return "".join(pieces)
    except Exception:
        logger.exception("Highlighting failed, returning original text")
        return text
