"""Pydantic schemas for API requests and responses."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class ParseResumeRequest(BaseModel):
    """
    Request body for resume parsing.

    resumeText is typed loosely so a missing or non-string value reaches the
    route's own validation and gets the documented error message.
    """

    resumeText: Optional[Any] = Field(default=None, description="Text extracted from the resume PDF")


class ExtractTextResponse(BaseModel):
    """Marked-up text extracted from an uploaded PDF."""

    text: str
    characters: int


class HealthResponse(BaseModel):
    status: str
    timestamp: str


class ErrorResponse(BaseModel):
    error: str
