"""
Person Request DTOs

DTOs for persona-related API requests.
"""

from pydantic import BaseModel, EmailStr, Field, field_validator

from constants import FieldLimits
from domain.entities.person import Person


class PersonRequest(BaseModel):
    """
    Request DTO for registering or replacing a persona.
    """

    nombre: str = Field(
        ...,
        min_length=1,
        max_length=FieldLimits.PERSON_NAME_MAX,
        description="Full name"
    )
    email: EmailStr = Field(..., description="Unique email address")
    area_id: int = Field(..., ge=1, le=FieldLimits.ID_MAX, strict=True, description="ID of the persona's area")

    @field_validator("nombre")
    @classmethod
    def validate_nombre(cls, v):
        """Reject names made only of whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("nombre cannot be blank")
        return v

    @field_validator("email")
    @classmethod
    def validate_email_length(cls, v):
        if len(v) > FieldLimits.EMAIL_MAX:
            raise ValueError(f"email cannot exceed {FieldLimits.EMAIL_MAX} characters")
        return v

    def to_entity(self) -> Person:
        return Person(nombre=self.nombre, email=str(self.email), area_id=self.area_id)

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "nombre": "Ana Pérez",
                "email": "ana.perez@empresa.com",
                "area_id": 1
            }
        }
