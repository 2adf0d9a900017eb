class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class SubjectIndexError(DomainError, IndexError):
    """Raised when a subject position does not exist (stale UI reference)."""


class PersistenceError(DomainError):
    """Raised when the stored profile cannot be read or written."""


class ExportError(DomainError):
    """Raised when an export cannot be produced or written."""


class StoreNotReadyError(RuntimeError):
    """Raised when the store is used before onboarding allows it.

    This is a caller bug, not a user-facing condition.
    """
