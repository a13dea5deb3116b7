"""User domain exceptions.

User-related exceptions for not found and conflict scenarios.
"""

from user_service.core.exceptions import ConflictError, NotFoundError


class UserNotFoundError(NotFoundError):
    """Raised when user cannot be found."""

    error_type = "user_not_found"

    def __init__(self, message: str = "User not found"):
        super().__init__(message)

    @classmethod
    def with_id(cls, user_id: int) -> "UserNotFoundError":
        return cls(f"User not found with id: {user_id}")

    @classmethod
    def with_email(cls, email: str) -> "UserNotFoundError":
        return cls(f"User not found with email: {email}")


class EmailExistsError(ConflictError):
    """Raised when another user already holds the email."""

    error_type = "email_exists"

    def __init__(self, message: str = "Email already registered"):
        super().__init__(message)

    @classmethod
    def for_email(cls, email: str) -> "EmailExistsError":
        return cls(f"A user with email {email} already exists")
