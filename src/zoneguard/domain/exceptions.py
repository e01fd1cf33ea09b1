"""
Domain exceptions for zoneguard.

Violations are results, not errors: they are never raised. The exceptions
here cover inputs the engine refuses to work with.
"""


class ZoneguardError(Exception):
    """Base class for all zoneguard errors."""


class ConfigurationError(ZoneguardError):
    """
    Raised when a policy document is malformed.

    Raised before any edge is evaluated; no partial policy is ever built.
    """

    def __init__(self, message: str, path: str | None = None):
        """
        Args:
            message: Human-readable error message
            path: Location of the offending value inside the document
                (e.g. ``zones[0].paths``), when known
        """
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


class SourceParseError(ZoneguardError):
    """Raised when a source file cannot be parsed for import extraction."""

    def __init__(self, source_file: str, reason: str):
        super().__init__(f"Cannot parse {source_file}: {reason}")
        self.source_file = source_file
        self.reason = reason
