class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class InvalidDomainError(ValidationError):
    """Raised when a sign-up email matches neither institutional domain."""


class ProfileNotFoundError(ValidationError):
    """Raised when a student signs up without a provisioned profile."""


class NoQuestionError(DomainError):
    """Raised when no question is active for the requested day."""


class DuplicateAnswerError(DomainError):
    """Raised when a student answers the same day's question twice."""
