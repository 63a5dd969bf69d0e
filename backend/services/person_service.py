"""
Person Service

Handles business logic for persona operations: email uniqueness among
active personas, validation of the referenced area, and existence checks
before updates and deletes.

The email lookup before a write is advisory. Two concurrent requests can
both pass it; the partial unique index on personas.email then rejects the
second write, and that violation is reported as the same domain error.
"""

from typing import List, Optional

from pydantic import EmailStr, TypeAdapter, ValidationError as PydanticValidationError

from domain.entities.person import Person
from domain.value_objects.record_state import RecordState
from exceptions import (
    EmailAlreadyRegisteredError,
    IntegrityViolationError,
    PersonNotFoundError,
    RecordNotFoundError,
    ReferencedAreaNotFoundError,
)
from repositories.area_repository import AreaRepository
from repositories.person_repository import PersonRepository
from services.interfaces import IPersonService
from utils.logging_utils import log_operation

# Same normalization EmailStr applies to request bodies (domain part lowercased)
_email_adapter = TypeAdapter(EmailStr)


def normalize_email(email: str) -> Optional[str]:
    """
    Normalize an email the way stored addresses were normalized.

    Returns:
        The normalized address, or None if the value is not an email
    """
    try:
        return _email_adapter.validate_python(email)
    except PydanticValidationError:
        return None


class PersonService(IPersonService):
    """Service for persona-related business logic."""

    def __init__(self, person_repo: PersonRepository, area_repo: AreaRepository):
        """
        Initialize PersonService.

        Args:
            person_repo: Persona repository
            area_repo: Area repository, used to validate area references
        """
        self.person_repo = person_repo
        self.area_repo = area_repo

    def _find_by_email(self, email: str) -> Optional[Person]:
        try:
            return self.person_repo.get_by_email(email)
        except RecordNotFoundError:
            return None

    def _ensure_area_exists(self, area_id: int) -> None:
        if not self.area_repo.exists(area_id):
            raise ReferencedAreaNotFoundError(area_id)

    def _translate_integrity_error(self, error: IntegrityViolationError, person: Person):
        if error.constraint == IntegrityViolationError.UNIQUE:
            return EmailAlreadyRegisteredError(person.email)
        if error.constraint == IntegrityViolationError.FOREIGN_KEY:
            return ReferencedAreaNotFoundError(person.area_id)
        return None

    @log_operation("create_person")
    def create(self, person: Person) -> Person:
        """
        Register a persona whose email is not used by any active persona.
        """
        if self._find_by_email(person.email) is not None:
            raise EmailAlreadyRegisteredError(person.email)

        self._ensure_area_exists(person.area_id)

        try:
            return self.person_repo.create(person)
        except IntegrityViolationError as e:
            translated = self._translate_integrity_error(e, person)
            if translated is None:
                raise
            raise translated from e

    def get_all(self, include_deleted: bool = False) -> List[Person]:
        return self.person_repo.get_all(include_deleted=include_deleted)

    def get_by_id(self, person_id: int) -> Person:
        try:
            return self.person_repo.get_by_id(person_id)
        except RecordNotFoundError as e:
            raise PersonNotFoundError(person_id) from e

    def get_by_email(self, email: str) -> Person:
        """
        Get an active persona by email, matched after normalization so the
        address a client registered with finds the stored record.
        """
        normalized = normalize_email(email)
        person = self._find_by_email(normalized) if normalized is not None else None
        if person is None:
            raise PersonNotFoundError(email)
        return person

    @log_operation("update_person")
    def update(self, person_id: int, person: Person) -> Person:
        """
        Replace a persona's name, email and area.

        Uniqueness is only re-checked when the email changes, and a match
        owned by the same persona is allowed.
        """
        existing = self.get_by_id(person_id)

        if not existing.owns_email(person.email):
            holder = self._find_by_email(person.email)
            if holder is not None and holder.id != person_id:
                raise EmailAlreadyRegisteredError(person.email)

        if person.area_id != existing.area_id or existing.area is None:
            self._ensure_area_exists(person.area_id)

        person.id = person_id
        try:
            return self.person_repo.update(person)
        except RecordNotFoundError as e:
            raise PersonNotFoundError(person_id) from e
        except IntegrityViolationError as e:
            translated = self._translate_integrity_error(e, person)
            if translated is None:
                raise
            raise translated from e

    @log_operation("delete_person")
    def delete(self, person_id: int) -> None:
        existing = self.get_by_id(person_id)
        if not existing.state.can_transition_to(RecordState.DELETED):
            raise PersonNotFoundError(person_id)

        try:
            self.person_repo.delete(person_id)
        except RecordNotFoundError as e:
            raise PersonNotFoundError(person_id) from e
