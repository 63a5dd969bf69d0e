"""
Area Response DTOs

DTOs for area-related API responses.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class AreaResponse(BaseModel):
    """
    Response DTO for area information.

    This DTO separates the API response from the database model,
    allowing them to evolve independently.
    """

    id: int = Field(description="Area ID")
    nombre: str = Field(description="Area name")
    descripcion: str = Field(description="Area description")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")
    deleted_at: Optional[datetime] = Field(None, description="Soft-delete timestamp, null while active")

    class Config:
        """Pydantic configuration."""
        from_attributes = True  # Allow creation from domain entities


class AreaWithCountResponse(BaseModel):
    """
    Response DTO for an area with its number of active personas.
    """

    id: int = Field(description="Area ID")
    nombre: str = Field(description="Area name")
    descripcion: str = Field(description="Area description")
    personas: int = Field(description="Number of active personas in the area")

    class Config:
        """Pydantic configuration."""
        from_attributes = True
