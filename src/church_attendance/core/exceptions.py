class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 500


class ValidationError(DomainError):
    """Raised when input data is missing or invalid."""

    status_code = 400


class NotFoundError(DomainError):
    """Raised when a student or sheet row cannot be found."""

    status_code = 404


class StorageError(DomainError):
    """Raised when the spreadsheet or file-storage service call fails."""


class ConfigurationError(DomainError):
    """Raised when required settings (spreadsheet id, credentials) are missing."""
