"""
Response envelopes.

Every successful body carries a ``data`` field; writes also carry a
human-readable ``message``. Failures use ErrorResponse.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar('T')


class DataResponse(BaseModel, Generic[T]):
    """Envelope for reads."""

    data: T


class MessageResponse(BaseModel, Generic[T]):
    """Envelope for writes: a confirmation message plus the affected record."""

    message: str
    data: T


class DeletedRecord(BaseModel):
    """Payload returned by delete endpoints."""

    id: int = Field(description="ID of the deleted record")


class ErrorResponse(BaseModel):
    """Envelope for failures."""

    error: str
    details: Optional[str] = None
