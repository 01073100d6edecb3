"""Errors raised by the user administration use cases.

Every error subclasses :class:`ValueError`, so callers that only care about
"the request was rejected" can keep catching ``ValueError``.
"""


class BackofficeError(ValueError):
    """Base class for expected domain failures."""


class MissingFieldsError(BackofficeError):
    """Raised when mandatory fields are absent from a request."""

    def __init__(self, fields: list[str]):
        self.fields = fields
        super().__init__("All fields are required")


class UserNotFoundError(BackofficeError):
    """Raised when the requested user does not exist."""

    def __init__(self, user_id: int | None = None):
        self.user_id = user_id
        super().__init__("User not found")


class DuplicateUserError(BackofficeError):
    """Raised when another account already uses the username or email."""

    def __init__(self):
        super().__init__("A user with this email or username already exists")


class ReferenceNotFoundError(BackofficeError):
    """Raised when a role or major reference does not exist."""

    def __init__(self, kind: str, reference_id: int):
        self.kind = kind
        self.reference_id = reference_id
        super().__init__(f"{kind.capitalize()} {reference_id} not found")


class SelfDeletionError(BackofficeError):
    """Raised when an administrator tries to delete their own account."""

    def __init__(self):
        super().__init__("You cannot delete your own account")


class EmailDeliveryError(BackofficeError):
    """Raised when a required email could not be delivered."""

    def __init__(self, recipient: str):
        self.recipient = recipient
        super().__init__("Failed to send the reset password email. Please try again.")


class InvalidTokenError(BackofficeError):
    """Raised when a token has a bad signature, is malformed or has expired."""

    def __init__(self, message: str = "Token is invalid or has expired"):
        super().__init__(message)


__all__ = [
    "BackofficeError",
    "DuplicateUserError",
    "EmailDeliveryError",
    "InvalidTokenError",
    "MissingFieldsError",
    "ReferenceNotFoundError",
    "SelfDeletionError",
    "UserNotFoundError",
]
