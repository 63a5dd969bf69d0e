"""
Service Interfaces

Abstract base classes for service layer following Dependency Inversion Principle.
This allows for dependency injection and easier testing/mocking.
"""

from abc import ABC, abstractmethod
from typing import List

from domain.entities.area import Area
from domain.entities.person import Person
from domain.value_objects.area_with_count import AreaWithCount


class IAreaService(ABC):
    """
    Abstract interface for area management services.
    """

    @abstractmethod
    def create(self, area: Area) -> Area:
        """
        Create an area.

        Raises:
            AreaNameTakenError: If an active area already uses the name
            DatabaseError: On storage failure
        """
        pass

    @abstractmethod
    def get_all(self, include_deleted: bool = False) -> List[Area]:
        """List areas, active ones only unless include_deleted is set."""
        pass

    @abstractmethod
    def get_by_id(self, area_id: int) -> Area:
        """
        Get an active area.

        Raises:
            AreaNotFoundError: If the area does not exist
        """
        pass

    @abstractmethod
    def update(self, area_id: int, area: Area) -> Area:
        """
        Replace an area's mutable fields.

        Raises:
            AreaNotFoundError: If the area does not exist
            AreaNameTakenError: If another active area uses the name
        """
        pass

    @abstractmethod
    def delete(self, area_id: int) -> None:
        """
        Soft-delete an area.

        Raises:
            AreaNotFoundError: If the area does not exist or is already deleted
            AreaInUseError: If active personas still reference it
        """
        pass

    @abstractmethod
    def get_areas_with_count(self) -> List[AreaWithCount]:
        """List active areas with their active persona counts."""
        pass


class IPersonService(ABC):
    """
    Abstract interface for persona management services.
    """

    @abstractmethod
    def create(self, person: Person) -> Person:
        """
        Register a persona.

        Raises:
            EmailAlreadyRegisteredError: If an active persona uses the email
            ReferencedAreaNotFoundError: If the area does not exist
        """
        pass

    @abstractmethod
    def get_all(self, include_deleted: bool = False) -> List[Person]:
        """List personas with their areas attached."""
        pass

    @abstractmethod
    def get_by_id(self, person_id: int) -> Person:
        """
        Raises:
            PersonNotFoundError: If the persona does not exist
        """
        pass

    @abstractmethod
    def get_by_email(self, email: str) -> Person:
        """
        Raises:
            PersonNotFoundError: If no active persona has the email
        """
        pass

    @abstractmethod
    def update(self, person_id: int, person: Person) -> Person:
        """
        Replace a persona's mutable fields.

        Raises:
            PersonNotFoundError: If the persona does not exist
            EmailAlreadyRegisteredError: If another active persona uses the email
            ReferencedAreaNotFoundError: If the area does not exist
        """
        pass

    @abstractmethod
    def delete(self, person_id: int) -> None:
        """
        Soft-delete a persona.

        Raises:
            PersonNotFoundError: If the persona does not exist or is already deleted
        """
        pass
