"""
Specification Pattern Implementation

Provides a way to encapsulate query criteria in reusable, composable specifications.
This follows the Specification Pattern from Domain-Driven Design.

Every repository read is built from specifications, which keeps the
soft-delete predicate (NotDeletedSpec) explicit in each query instead of
relying on ORM-level defaults.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from sqlalchemy import and_, or_, not_


T = TypeVar('T')


class Specification(ABC, Generic[T]):
    """
    Abstract base class for specifications.

    A specification encapsulates a single business rule or query criterion.
    """

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool:
        """
        Check if a candidate object satisfies this specification.

        Args:
            candidate: Object to check

        Returns:
            True if candidate satisfies specification
        """
        pass

    @abstractmethod
    def to_sql_filter(self):
        """
        Convert specification to SQLAlchemy filter expression.

        Returns:
            SQLAlchemy filter expression
        """
        pass

    def __and__(self, other: "Specification[T]") -> "AndSpecification[T]":
        """Combine specifications with AND."""
        return AndSpecification(self, other)

    def __or__(self, other: "Specification[T]") -> "OrSpecification[T]":
        """Combine specifications with OR."""
        return OrSpecification(self, other)

    def __invert__(self) -> "NotSpecification[T]":
        """Negate specification with NOT."""
        return NotSpecification(self)


class AndSpecification(Specification[T]):
    """Specification that combines two specifications with AND."""

    def __init__(self, left: Specification[T], right: Specification[T]):
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(candidate)

    def to_sql_filter(self):
        return and_(self.left.to_sql_filter(), self.right.to_sql_filter())


class OrSpecification(Specification[T]):
    """Specification that combines two specifications with OR."""

    def __init__(self, left: Specification[T], right: Specification[T]):
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) or self.right.is_satisfied_by(candidate)

    def to_sql_filter(self):
        return or_(self.left.to_sql_filter(), self.right.to_sql_filter())


class NotSpecification(Specification[T]):
    """Specification that negates another specification."""

    def __init__(self, spec: Specification[T]):
        self.spec = spec

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.spec.is_satisfied_by(candidate)

    def to_sql_filter(self):
        return not_(self.spec.to_sql_filter())


# ----------------------------------------------------------------------------
# Concrete specifications shared by the area and persona repositories
# ----------------------------------------------------------------------------

class NotDeletedSpec(Specification[Any]):
    """Rows that have not been soft-deleted."""

    def __init__(self, model):
        """
        Args:
            model: SQLAlchemy model class with a deleted_at column
        """
        self.model = model

    def is_satisfied_by(self, candidate) -> bool:
        return candidate.deleted_at is None

    def to_sql_filter(self):
        return self.model.deleted_at.is_(None)


class FieldEqualsSpec(Specification[Any]):
    """Rows whose column equals a given value."""

    def __init__(self, model, field: str, value: Any):
        """
        Args:
            model: SQLAlchemy model class
            field: Column attribute name
            value: Value to compare against
        """
        self.model = model
        self.field = field
        self.value = value

    def is_satisfied_by(self, candidate) -> bool:
        return getattr(candidate, self.field) == self.value

    def to_sql_filter(self):
        return getattr(self.model, self.field) == self.value


class ByIdSpec(FieldEqualsSpec):
    """Row with a given primary key."""

    def __init__(self, model, record_id: int):
        super().__init__(model, 'id', record_id)
