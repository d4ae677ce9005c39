"""Domain Exceptions."""

from apps.accounts.domain.exceptions.auth import (
    INVALID_TOKEN_MESSAGE,
    AuthenticationError,
    EmailNotConfirmedError,
    InvalidCredentialsError,
    InvalidTokenError,
    RecentPasswordChangeError,
    StaleCredentialsError,
    TokenExpiredError,
    TokenRevokedError,
    TokenTypeMismatchError,
)
from apps.accounts.domain.exceptions.base import DomainError
from apps.accounts.domain.exceptions.user import (
    ConflictError,
    EmailAlreadyInUseError,
    UsernameAlreadyInUseError,
    UserNotFoundError,
)
from apps.accounts.domain.exceptions.validation import (
    EmailAlreadyConfirmedError,
    InvalidEmailError,
    InvalidIdentifierError,
    InvalidPasswordError,
    NoChangesProvidedError,
    PasswordMismatchError,
    PasswordReuseError,
    ValidationError,
)

__all__ = [
    "DomainError",
    # validation
    "ValidationError",
    "InvalidEmailError",
    "InvalidIdentifierError",
    "PasswordMismatchError",
    "InvalidPasswordError",
    "PasswordReuseError",
    "NoChangesProvidedError",
    "EmailAlreadyConfirmedError",
    # auth
    "INVALID_TOKEN_MESSAGE",
    "AuthenticationError",
    "InvalidCredentialsError",
    "RecentPasswordChangeError",
    "EmailNotConfirmedError",
    "InvalidTokenError",
    "TokenExpiredError",
    "TokenTypeMismatchError",
    "TokenRevokedError",
    "StaleCredentialsError",
    # user
    "UserNotFoundError",
    "ConflictError",
    "EmailAlreadyInUseError",
    "UsernameAlreadyInUseError",
]
