# errors.py
"""Exception hierarchy for greenclaims.

Only caller bugs and broken configuration raise.  Faults inside a scan are
recovered by the scanner itself and never reach the caller.
"""


class GreenClaimsError(Exception):
    """Base class for all greenclaims errors."""


class InvalidInputError(GreenClaimsError, TypeError):
    """Raised when :func:`greenclaims.scanner.scan` receives a non-string."""


class TermLoadError(GreenClaimsError, ValueError):
    """Raised when a YAML term file cannot be turned into term definitions."""


class ConfigError(GreenClaimsError, ValueError):
    """Raised for unknown or mistyped scanner configuration values."""
