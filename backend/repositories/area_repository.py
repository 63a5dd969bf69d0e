"""
Area repository for area-specific data access operations.
"""

from typing import List

from sqlalchemy import func, and_
from sqlalchemy.orm import Session

from domain.entities.area import Area
from domain.value_objects.area_with_count import AreaWithCount
from models import Area as AreaModel, Persona as PersonaModel
from .base_repository import BaseRepository
from .specifications import NotDeletedSpec


def area_to_entity(row: AreaModel) -> Area:
    """Map an area row to the domain entity."""
    return Area(
        id=row.id,
        nombre=row.nombre,
        descripcion=row.descripcion or '',
        created_at=row.created_at,
        updated_at=row.updated_at,
        deleted_at=row.deleted_at,
    )


class AreaRepository(BaseRepository[AreaModel, Area]):
    """Repository for Area model operations."""

    entity_name = 'area'

    def __init__(self, db: Session):
        super().__init__(db, AreaModel)

    def _to_entity(self, result: AreaModel) -> Area:
        return area_to_entity(result)

    def create(self, area: Area) -> Area:
        """
        Store a new area.

        Args:
            area: Entity to store (its id is ignored)

        Returns:
            Stored entity with id and timestamps assigned

        Raises:
            IntegrityViolationError: If the name is already used by an active area
        """
        row = AreaModel(nombre=area.nombre, descripcion=area.descripcion or '')
        return self._to_entity(self._insert(row))

    def update(self, area: Area) -> Area:
        """
        Replace the mutable fields of an existing area.

        Identity and created_at are preserved.

        Raises:
            RecordNotFoundError: If the area does not exist or is deleted
            IntegrityViolationError: If the new name collides with another active area
        """
        row = self._load_row(area.id)
        row.nombre = area.nombre
        row.descripcion = area.descripcion or ''
        return self._to_entity(self._save(row))

    def get_all_with_count(self) -> List[AreaWithCount]:
        """
        Get every active area with the number of active personas referencing it.

        Uses a LEFT OUTER JOIN so areas without personas report 0.

        Returns:
            List of AreaWithCount ordered by area id
        """
        query = self.db.query(
            AreaModel.id,
            AreaModel.nombre,
            AreaModel.descripcion,
            func.count(PersonaModel.id).label('personas')
        ).outerjoin(
            PersonaModel,
            and_(
                PersonaModel.area_id == AreaModel.id,
                NotDeletedSpec(PersonaModel).to_sql_filter()
            )
        ).filter(
            NotDeletedSpec(AreaModel).to_sql_filter()
        ).group_by(
            AreaModel.id, AreaModel.nombre, AreaModel.descripcion
        ).order_by(AreaModel.id)

        with self._translate_errors('get_all_with_count'):
            results = query.all()

        return [
            AreaWithCount(
                id=r.id,
                nombre=r.nombre,
                descripcion=r.descripcion or '',
                personas=r.personas
            )
            for r in results
        ]
