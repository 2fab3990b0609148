# greenclaims package
"""Green Claims Scanner - flags marketing text that is likely to breach Directive (EU) 2024/825."""

from .errors import GreenClaimsError, InvalidInputError, TermLoadError, ConfigError
from .terms import (
    TermDefinition, BANNED_TERMS, make_term, load_terms_from_yaml,
    get_all_terms, get_terms_by_severity, get_terms_by_language, get_terms_by_category,
)
from .models import ScanMatch, ScanResult, Findings, Summary, ScanResponse, LegacyFinding, LegacyMatch
from .scoring import calculate_risk_score, estimate_penalty, risk_level
from .scanner import scan, empty_result, extract_context
from .legacy import to_legacy_shape, scan_legacy
from .highlight import highlight
from .report import render_report
from .config import ScannerConfig, load_config, build_corpus

__version__ = "1.0.0"

__all__ = [
    # Errors
    "GreenClaimsError", "InvalidInputError", "TermLoadError", "ConfigError",

    # Corpus
    "TermDefinition", "BANNED_TERMS", "make_term", "load_terms_from_yaml",
    "get_all_terms", "get_terms_by_severity", "get_terms_by_language", "get_terms_by_category",

    # Results
    "ScanMatch", "ScanResult", "Findings", "Summary",
    "ScanResponse", "LegacyFinding", "LegacyMatch",

    # Scanning
    "scan", "empty_result", "extract_context",
    "calculate_risk_score", "estimate_penalty", "risk_level",
    "to_legacy_shape", "scan_legacy",

    # Rendering
    "highlight", "render_report",

    # Configuration
    "ScannerConfig", "load_config", "build_corpus",
]
