class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class LeaveSubmissionBlocked(ValidationError):
    """Raised when the advisory verdict for a leave request is ERROR."""


class StorageError(Exception):
    """Raised by storage backends on any access fault."""


class AdvisoryUnavailableError(Exception):
    """Raised when the advisory endpoint cannot produce a usable reply."""
