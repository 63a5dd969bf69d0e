"""
Person entity.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from domain.entities.area import Area
from domain.value_objects.record_state import RecordState


@dataclass
class Person:
    """
    A registered persona.

    ``area`` is the denormalized area the repository attaches on reads. It is
    None on records built from requests, and when the referenced area has
    been soft-deleted.
    """

    nombre: str
    email: str
    area_id: int
    id: Optional[int] = None
    area: Optional[Area] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @property
    def state(self) -> RecordState:
        return RecordState.from_deleted_at(self.deleted_at)

    def owns_email(self, email: str) -> bool:
        """Check whether this persona already holds the given email."""
        return self.email == email
