"""
Person Response DTOs

DTOs for persona-related API responses.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

from .area_response import AreaResponse


class PersonResponse(BaseModel):
    """
    Response DTO for persona information, with the area nested.
    """

    id: int = Field(description="Persona ID")
    nombre: str = Field(description="Full name")
    email: str = Field(description="Email address")
    area_id: int = Field(description="ID of the persona's area")
    area: Optional[AreaResponse] = Field(None, description="Attached area, null if it was deleted")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")
    deleted_at: Optional[datetime] = Field(None, description="Soft-delete timestamp, null while active")

    class Config:
        """Pydantic configuration."""
        from_attributes = True
