"""
Area Service

Handles business logic for area operations: name uniqueness, existence
checks before updates and deletes, and the rule that an area still
referenced by active personas cannot be deleted.
"""

from typing import List
import logging

from domain.entities.area import Area
from domain.value_objects.area_with_count import AreaWithCount
from domain.value_objects.record_state import RecordState
from exceptions import (
    AreaInUseError,
    AreaNameTakenError,
    AreaNotFoundError,
    IntegrityViolationError,
    RecordNotFoundError,
)
from repositories.area_repository import AreaRepository
from repositories.person_repository import PersonRepository
from services.interfaces import IAreaService
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class AreaService(IAreaService):
    """Service for area-related business logic."""

    def __init__(self, area_repo: AreaRepository, person_repo: PersonRepository):
        """
        Initialize AreaService.

        Args:
            area_repo: Area repository
            person_repo: Persona repository, used for reference counts
        """
        self.area_repo = area_repo
        self.person_repo = person_repo

    @log_operation("create_area")
    def create(self, area: Area) -> Area:
        try:
            return self.area_repo.create(area)
        except IntegrityViolationError as e:
            if e.constraint == IntegrityViolationError.UNIQUE:
                raise AreaNameTakenError(area.nombre) from e
            raise

    def get_all(self, include_deleted: bool = False) -> List[Area]:
        return self.area_repo.get_all(include_deleted=include_deleted)

    def get_by_id(self, area_id: int) -> Area:
        try:
            return self.area_repo.get_by_id(area_id)
        except RecordNotFoundError as e:
            raise AreaNotFoundError(area_id) from e

    @log_operation("update_area")
    def update(self, area_id: int, area: Area) -> Area:
        """
        Replace an area's name and description.

        The existing record is fetched first so a missing area is reported
        as AreaNotFoundError; other repository errors pass through unchanged.
        """
        self.get_by_id(area_id)

        area.id = area_id
        try:
            return self.area_repo.update(area)
        except RecordNotFoundError as e:
            # Deleted between the lookup and the write
            raise AreaNotFoundError(area_id) from e
        except IntegrityViolationError as e:
            if e.constraint == IntegrityViolationError.UNIQUE:
                raise AreaNameTakenError(area.nombre) from e
            raise

    @log_operation("delete_area")
    def delete(self, area_id: int) -> None:
        """
        Soft-delete an area that no active persona references.

        Raises:
            AreaNotFoundError: If the area does not exist or is already deleted
            AreaInUseError: If active personas still reference the area
        """
        existing = self.get_by_id(area_id)
        if not existing.state.can_transition_to(RecordState.DELETED):
            raise AreaNotFoundError(area_id)

        person_count = self.person_repo.count_by_area(area_id)
        if person_count > 0:
            logger.warning(f"Refusing to delete area {area_id}: {person_count} persona(s) still reference it")
            raise AreaInUseError(area_id, person_count)

        try:
            self.area_repo.delete(area_id)
        except RecordNotFoundError as e:
            raise AreaNotFoundError(area_id) from e

    def get_areas_with_count(self) -> List[AreaWithCount]:
        return self.area_repo.get_all_with_count()
