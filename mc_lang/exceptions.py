"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class McLangError(Exception):
    """Base exception for all application-specific errors."""


class ConfigurationError(McLangError):
    """Raised for invalid option combinations or values."""


class ManifestError(McLangError):
    """Raised when the version manifest cannot be fetched or parsed. Fatal for a run."""


class SchemaMismatchError(McLangError):
    """Raised when a fetched JSON document does not have the expected shape."""

    def __init__(self, document: str, detail: str):
        self.document = document
        super().__init__(f"Unexpected {document} format: {detail}")


class ReleaseProcessingError(McLangError):
    """Raised when a single release cannot be processed."""


class ChecksumMismatchError(ReleaseProcessingError):
    """Raised when a downloaded client archive does not match its published SHA-1."""

    def __init__(self, filename: str, expected: str, actual: str):
        self.filename = filename
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{filename} SHA1 mismatch (expected {expected}, got {actual})"
        )
