"""
Person repository for persona-specific data access operations.

Reads attach the referenced area through an explicit outer join, so callers
get a denormalized record without any lazy loading.
"""

from sqlalchemy import and_
from sqlalchemy.orm import Session, Query

from domain.entities.person import Person
from models import Persona as PersonaModel, Area as AreaModel
from exceptions import RecordNotFoundError
from .area_repository import area_to_entity
from .base_repository import BaseRepository
from .specifications import NotDeletedSpec, FieldEqualsSpec


class PersonRepository(BaseRepository[PersonaModel, Person]):
    """Repository for Persona model operations."""

    entity_name = 'persona'

    def __init__(self, db: Session):
        super().__init__(db, PersonaModel)

    def _query(self) -> Query:
        # Soft-deleted areas are not attached
        return self.db.query(PersonaModel, AreaModel).outerjoin(
            AreaModel,
            and_(
                AreaModel.id == PersonaModel.area_id,
                NotDeletedSpec(AreaModel).to_sql_filter()
            )
        )

    def _to_entity(self, result) -> Person:
        row, area_row = result
        return Person(
            id=row.id,
            nombre=row.nombre,
            email=row.email,
            area_id=row.area_id,
            area=area_to_entity(area_row) if area_row is not None else None,
            created_at=row.created_at,
            updated_at=row.updated_at,
            deleted_at=row.deleted_at,
        )

    def create(self, person: Person) -> Person:
        """
        Store a new persona.

        Returns:
            Stored entity with id, timestamps and area attached

        Raises:
            IntegrityViolationError: On duplicate active email or unknown area_id
        """
        row = PersonaModel(nombre=person.nombre, email=person.email, area_id=person.area_id)
        self._insert(row)
        return self.get_by_id(row.id)

    def update(self, person: Person) -> Person:
        """
        Replace the mutable fields of an existing persona.

        Raises:
            RecordNotFoundError: If the persona does not exist or is deleted
            IntegrityViolationError: On duplicate active email or unknown area_id
        """
        row = self._load_row(person.id)
        row.nombre = person.nombre
        row.email = person.email
        row.area_id = person.area_id
        self._save(row)
        return self.get_by_id(row.id)

    def get_by_email(self, email: str) -> Person:
        """
        Get an active persona by email.

        Raises:
            RecordNotFoundError: If no active persona has this email
        """
        person = self.find_one(FieldEqualsSpec(PersonaModel, 'email', email))
        if person is None:
            raise RecordNotFoundError(self.entity_name, email)
        return person

    def count_by_area(self, area_id: int) -> int:
        """
        Count active personas referencing an area.
        """
        return self.count(FieldEqualsSpec(PersonaModel, 'area_id', area_id))
