class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when the identity provider rejects credentials or a session."""


class NotFoundError(DomainError):
    """Raised when a referenced row does not exist."""


class BackendError(DomainError):
    """Raised when the hosted backend rejects or fails a request."""
