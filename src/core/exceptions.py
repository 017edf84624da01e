"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_QUERY_PARAMETER = "MISSING_QUERY_PARAMETER"

    # Singleton / uniqueness errors (400)
    PROFILE_ALREADY_EXISTS = "PROFILE_ALREADY_EXISTS"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ProfileNotFoundError(AppException):
    """No profile has been created yet."""

    def __init__(self, message: str = "Profile not found") -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=message,
            status_code=404,
        )


class ProfileAlreadyExistsError(AppException):
    """A profile already exists; only one may ever be stored."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_ALREADY_EXISTS,
            message="Profile already exists. Use PUT to update.",
            status_code=400,
        )


class DuplicateEmailError(AppException):
    """The email is already used by a stored profile."""

    def __init__(self, email: str) -> None:
        super().__init__(
            error_code=ErrorCode.DUPLICATE_EMAIL,
            message="Email already exists",
            status_code=400,
            details={"email": email},
        )


class ProfileValidationError(AppException):
    """Profile data failed one or more validation rules.

    ``errors`` holds one human readable message per failing rule.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message="Validation error",
            status_code=400,
            details={"errors": errors},
        )


class MissingQueryParameterError(AppException):
    """A required query parameter was absent or empty."""

    def __init__(self, parameter: str, message: str | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.MISSING_QUERY_PARAMETER,
            message=message or f"Query parameter '{parameter}' is required",
            status_code=400,
            details={"parameter": parameter},
        )
