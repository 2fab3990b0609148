# report.py
"""Plain-text compliance report rendered from the legacy result shape.

The report is fully determined by the :class:`ScanResponse` it is given;
the penalty estimate is optional because the legacy shape does not carry
it.
"""

from __future__ import annotations

from typing import Optional

from .models import LegacyFinding, ScanResponse
from .scoring import risk_level

RISK_LABELS = {
    "critical": "Critical Risk",
    "high": "High Risk",
    "medium": "Medium Risk",
    "low": "Low Risk",
}

RULE = "=" * 60


def _render_finding(number: int, finding: LegacyFinding) -> list[str]:
    lines = [
        f"{number}. {finding.term} [{finding.severity.upper()}]",
        f"   Regulation:    {finding.regulation}",
        f"   Penalty range: {finding.penalty_range}",
        f"   {finding.description}",
    ]
    for match in finding.matches:
        context = " ".join(match.context.split())
        lines.append(f"   - line {match.line}: {context}")
    if finding.alternatives:
        lines.append("   Suggested alternatives:")
        lines.extend(f"     * {alt}" for alt in finding.alternatives)
    return lines


def render_report(response: ScanResponse, estimated_penalty: Optional[str] = None) -> str:
    level = risk_level(response.score)
    lines = [
        RULE,
        "Green Claims Compliance Report",
        f"Generated: {response.timestamp.strftime('%Y-%m-%d %H:%M %Z').strip()}",
        RULE,
        f"Risk score: {response.score}/100 ({RISK_LABELS[level]})",
        f"Findings: {response.total_matches} "
        f"(critical {response.critical_count}, warning {response.warning_count}, "
        f"minor {response.minor_count})",
    ]
    if estimated_penalty is not None:
        lines.append(f"Estimated penalty: {estimated_penalty}")
    lines.append("")

    if not response.findings:
        lines.append("No regulated terms found.")
    for i, finding in enumerate(response.findings, start=1):
        lines.extend(_render_finding(i, finding))
        lines.append("")

    return "\n".join(lines).rstrip() + "\n"
