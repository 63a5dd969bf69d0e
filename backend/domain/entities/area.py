"""
Area entity.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from domain.value_objects.record_state import RecordState


@dataclass
class Area:
    """
    An organisational area.

    ``id`` is None until the repository stores the record.
    """

    nombre: str
    descripcion: str = ""
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @property
    def state(self) -> RecordState:
        return RecordState.from_deleted_at(self.deleted_at)
