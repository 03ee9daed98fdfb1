"""Pydantic schema of the uniform error envelope."""

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    code: int
    message: str | dict[str, list[str]]


class ErrorResponse(BaseModel):
    """``{"error": {"code": ..., "message": ...}}``"""

    error: ErrorDetail
