"""Error response schemas for consistent API error formatting."""

from datetime import UTC, datetime

from pydantic import BaseModel, Field


def _utc_now() -> datetime:
    return datetime.now(UTC).replace(microsecond=0)


class ErrorResponse(BaseModel):
    """Standard error response schema.

    All API errors return this format for consistency.
    """

    status: int
    type: str
    message: str
    timestamp: datetime = Field(default_factory=_utc_now)
    path: str


class ValidationErrorResponse(ErrorResponse):
    """Error response for rejected request input, with per-field messages."""

    errors: dict[str, str] = Field(default_factory=dict)
