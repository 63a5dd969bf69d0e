"""
Area Request DTOs

DTOs for area-related API requests.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from constants import FieldLimits
from domain.entities.area import Area


class AreaRequest(BaseModel):
    """
    Request DTO for creating or replacing an area.

    Update is a full replacement, so the same contract serves POST and PUT.
    """

    nombre: str = Field(
        ...,
        min_length=1,
        max_length=FieldLimits.AREA_NAME_MAX,
        description="Unique area name"
    )
    descripcion: Optional[str] = Field("", description="Free-text description, null is stored as empty")

    @field_validator("nombre")
    @classmethod
    def validate_nombre(cls, v):
        """Reject names made only of whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("nombre cannot be blank")
        return v

    @field_validator("descripcion")
    @classmethod
    def default_descripcion(cls, v):
        return "" if v is None else v

    def to_entity(self) -> Area:
        return Area(nombre=self.nombre, descripcion=self.descripcion)

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "nombre": "Ventas",
                "descripcion": "Área de ventas"
            }
        }
