"""Error response schemas for API documentation."""

from pydantic import BaseModel

from src.core.exceptions import ErrorDetails


class ErrorDetail(BaseModel):
    """Standard error detail structure."""

    code: str
    message: str
    details: ErrorDetails = {}


class ErrorResponse(BaseModel):
    """Standard error response wrapper, as built by the exception handlers."""

    error: ErrorDetail
