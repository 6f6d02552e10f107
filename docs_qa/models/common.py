"""
Common response models.

Error envelope shared by every endpoint.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str = Field(description="Error summary")
    message: str | None = Field(default=None, description="Underlying cause, when available")
