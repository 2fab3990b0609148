"""
Pytest configuration and fixtures
"""

import pytest

from greenclaims.samples import SAMPLE_TEXTS
from greenclaims.terms import make_term


def synthetic_term(term, regex, severity="critical", language="en", category="general"):
    """Build a corpus entry with neutral metadata for engine tests."""
    return make_term(
        term,
        regex,
        language=language,
        category=category,
        severity=severity,
        regulation="TEST Art. 1",
        description=f"synthetic {severity} term",
        alternatives=[f"instead of {term}"],
    )


@pytest.fixture
def make_synthetic():
    return synthetic_term


@pytest.fixture
def tiny_corpus():
    """Three placeholder words, one per severity."""
    return [
        synthetic_term("crit", r"\bcrit\b", "critical"),
        synthetic_term("warn", r"\bwarn\b", "warning"),
        synthetic_term("min", r"\bmin\b", "minor"),
    ]


@pytest.fixture
def samples():
    return dict(SAMPLE_TEXTS)
