# scoring.py
"""Risk score, penalty bracket and risk level.

The weights and bracket boundaries are product constants.  Changing them
changes the risk a given text is reported to carry, so tests pin them.
"""

SEVERITY_WEIGHTS = {
    "critical": 30,
    "warning": 10,
    "minor": 3,
}

MIN_RISK_SCORE = 0
MAX_RISK_SCORE = 100

NO_RISK_PENALTY = "No risk"

# (lowest critical count, estimate), highest bracket first
PENALTY_BRACKETS = (
    (6, "€200,000+"),
    (3, "€50,000 - €200,000"),
    (1, "€10,000 - €50,000"),
)

# (lowest score, level), highest first
RISK_LEVELS = (
    (81, "critical"),
    (61, "high"),
    (31, "medium"),
)


def calculate_risk_score(critical: int, warnings: int, minor: int) -> int:
    """Weighted match count clamped to ``[0, 100]``."""
    raw = (
        critical * SEVERITY_WEIGHTS["critical"]
        + warnings * SEVERITY_WEIGHTS["warning"]
        + minor * SEVERITY_WEIGHTS["minor"]
    )
    return max(MIN_RISK_SCORE, min(MAX_RISK_SCORE, raw))


def estimate_penalty(critical_count: int) -> str:
    """Map the number of critical matches to a penalty estimate.

    Brackets: 0, 1-2, 3-5, 6 and more.  Warning and minor matches do not
    move the estimate.
    """
    for lowest, estimate in PENALTY_BRACKETS:
        if critical_count >= lowest:
            return estimate
    return NO_RISK_PENALTY


def risk_level(score: int) -> str:
    for lowest, level in RISK_LEVELS:
        if score >= lowest:
            return level
    return "low"
