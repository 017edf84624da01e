"""Common Pydantic schemas shared across the API."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standardized error response.

    ``errors`` lists validation messages; ``error`` carries the raw exception
    text for unexpected failures outside production.
    """

    success: bool = False
    error_code: str
    message: str
    errors: list[str] | None = None
    error: str | None = None
