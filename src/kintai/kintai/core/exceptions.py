class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when credentials or bearer tokens are rejected."""


class MissingTokenError(AuthenticationError):
    """No bearer token was presented."""


class TokenExpiredError(AuthenticationError):
    """The bearer token was valid but its lifetime has elapsed."""


class InvalidTokenError(AuthenticationError):
    """The bearer token is malformed or carries a bad signature."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when the requested user, record or request does not exist."""


class StoreError(DomainError):
    """Raised when the persistence layer fails."""


class StoreTimeoutError(StoreError):
    """Raised when a store call exceeds its time bound."""


class ConfigurationError(Exception):
    """Raised at boot when settings are missing or inconsistent."""
