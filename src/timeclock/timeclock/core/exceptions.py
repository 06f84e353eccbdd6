class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ImportFormatError(ValidationError):
    """Raised when an uploaded spreadsheet is structurally invalid."""


class PersistenceError(DomainError):
    """Raised when a batch could not be committed to storage."""
