"""
Base repository providing common CRUD operations over soft-deletable tables.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from datetime import datetime
from typing import Generic, TypeVar, List, Optional, Type
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, Query

from exceptions import DatabaseError, IntegrityViolationError, RecordNotFoundError
from .specifications import Specification, NotDeletedSpec, ByIdSpec

logger = logging.getLogger(__name__)

T = TypeVar('T')  # SQLAlchemy model
E = TypeVar('E')  # Domain entity

# SQLSTATE codes reported by PostgreSQL drivers
_PG_UNIQUE_VIOLATION = '23505'
_PG_FOREIGN_KEY_VIOLATION = '23503'


def classify_integrity_error(error: IntegrityError) -> Optional[str]:
    """
    Work out which kind of constraint rejected a write.

    Args:
        error: IntegrityError raised by SQLAlchemy

    Returns:
        IntegrityViolationError.UNIQUE, IntegrityViolationError.FOREIGN_KEY or None
    """
    orig = error.orig
    sqlstate = getattr(orig, 'sqlstate', None) or getattr(orig, 'pgcode', None)
    if sqlstate == _PG_UNIQUE_VIOLATION:
        return IntegrityViolationError.UNIQUE
    if sqlstate == _PG_FOREIGN_KEY_VIOLATION:
        return IntegrityViolationError.FOREIGN_KEY

    # SQLite only reports constraint failures through the message text
    message = str(orig).upper()
    if 'UNIQUE' in message:
        return IntegrityViolationError.UNIQUE
    if 'FOREIGN KEY' in message:
        return IntegrityViolationError.FOREIGN_KEY
    return None


class BaseRepository(ABC, Generic[T, E]):
    """
    Generic base repository providing common CRUD operations.
    All specific repositories should inherit from this class.

    Reads return domain entities, never ORM rows. Every read applies
    NotDeletedSpec unless the caller passes include_deleted=True, and every
    write commits. Storage failures surface as RecordNotFoundError,
    IntegrityViolationError or DatabaseError; the session is rolled back first.
    """

    entity_name = 'record'

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    @abstractmethod
    def _to_entity(self, result) -> E:
        """Map a query result (a model row, or a row tuple for joined queries) to an entity."""

    def _query(self) -> Query:
        """Base SELECT for reads; joined repositories override this."""
        return self.db.query(self.model)

    def _active(self, spec: Optional[Specification] = None, include_deleted: bool = False) -> Specification:
        """Combine a specification with the soft-delete predicate."""
        not_deleted = NotDeletedSpec(self.model)
        if spec is None:
            return not_deleted
        return spec if include_deleted else spec & not_deleted

    @contextmanager
    def _translate_errors(self, operation: str):
        """
        Convert SQLAlchemy failures into repository exceptions.

        Args:
            operation: Name of the operation, used in errors and logs
        """
        try:
            yield
        except IntegrityError as e:
            self.db.rollback()
            constraint = classify_integrity_error(e)
            logger.warning(f"{self.entity_name} {operation} rejected by {constraint or 'unknown'} constraint")
            raise IntegrityViolationError(operation, f"Constraint violation during {operation}", constraint) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"{self.entity_name} {operation} failed: {e}", exc_info=True)
            raise DatabaseError(operation, f"Database operation failed: {operation}") from e

    def find(self, spec: Optional[Specification] = None, include_deleted: bool = False) -> List[E]:
        """
        Find records matching a Specification, ordered by id.

        Args:
            spec: Specification to match, or None for every record
            include_deleted: Also return soft-deleted records

        Returns:
            List of entities
        """
        query = self._query()
        if spec is not None or not include_deleted:
            query = query.filter(self._active(spec, include_deleted).to_sql_filter())
        with self._translate_errors('find'):
            return [self._to_entity(r) for r in query.order_by(self.model.id).all()]

    def find_one(self, spec: Specification, include_deleted: bool = False) -> Optional[E]:
        """
        Find first record matching a Specification.

        Returns:
            Matching entity, or None
        """
        query = self._query().filter(self._active(spec, include_deleted).to_sql_filter())
        with self._translate_errors('find_one'):
            result = query.order_by(self.model.id).first()
        return self._to_entity(result) if result is not None else None

    def count(self, spec: Optional[Specification] = None) -> int:
        """
        Count active records matching a Specification.
        """
        query = self.db.query(self.model).filter(self._active(spec).to_sql_filter())
        with self._translate_errors('count'):
            return query.count()

    def get_all(self, include_deleted: bool = False) -> List[E]:
        """
        Retrieve all records.

        Args:
            include_deleted: Also return soft-deleted records

        Returns:
            List of entities (empty when the table is empty)
        """
        return self.find(include_deleted=include_deleted)

    def get_by_id(self, record_id: int, include_deleted: bool = False) -> E:
        """
        Retrieve a record by its ID.

        Raises:
            RecordNotFoundError: If no matching record exists
        """
        entity = self.find_one(ByIdSpec(self.model, record_id), include_deleted=include_deleted)
        if entity is None:
            raise RecordNotFoundError(self.entity_name, record_id)
        return entity

    def exists(self, record_id: int) -> bool:
        """
        Check if an active record exists by ID.
        """
        return self.count(ByIdSpec(self.model, record_id)) > 0

    def _load_row(self, record_id: int) -> T:
        """
        Load the active model row for a write.

        Raises:
            RecordNotFoundError: If no active row exists
        """
        spec = self._active(ByIdSpec(self.model, record_id))
        with self._translate_errors('load'):
            row = self.db.query(self.model).filter(spec.to_sql_filter()).first()
        if row is None:
            raise RecordNotFoundError(self.entity_name, record_id)
        return row

    def _insert(self, row: T) -> T:
        """Add and commit a new row."""
        with self._translate_errors('create'):
            self.db.add(row)
            self.db.commit()
        return row

    def _save(self, row: T, operation: str = 'update') -> T:
        """Commit pending changes on a loaded row."""
        row.updated_at = datetime.utcnow()
        with self._translate_errors(operation):
            self.db.commit()
        return row

    def delete(self, record_id: int) -> None:
        """
        Soft-delete a record by its ID.

        Raises:
            RecordNotFoundError: If the record does not exist or is already deleted
        """
        row = self._load_row(record_id)
        row.deleted_at = datetime.utcnow()
        self._save(row, 'delete')
