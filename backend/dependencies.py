"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating repository and service instances,
following the Dependency Inversion Principle. This allows for easier testing
and better separation of concerns.
"""

from sqlalchemy.orm import Session
from fastapi import Depends
from database import get_db
from repositories.area_repository import AreaRepository
from repositories.person_repository import PersonRepository
from services.interfaces import IAreaService, IPersonService
from services.area_service import AreaService
from services.person_service import PersonService


def get_area_repository(db: Session) -> AreaRepository:
    """
    Factory function for creating AreaRepository instances.

    Args:
        db: Database session

    Returns:
        AreaRepository instance
    """
    return AreaRepository(db)


def get_person_repository(db: Session) -> PersonRepository:
    """
    Factory function for creating PersonRepository instances.

    Args:
        db: Database session

    Returns:
        PersonRepository instance
    """
    return PersonRepository(db)


def get_area_service(db: Session = Depends(get_db)) -> IAreaService:
    """
    Factory function for creating AreaService instances.

    Args:
        db: Database session (injected)

    Returns:
        IAreaService: Area service implementation

    Note: Tests override this dependency to swap in a fake service.
    """
    return AreaService(get_area_repository(db), get_person_repository(db))


def get_person_service(db: Session = Depends(get_db)) -> IPersonService:
    """
    Factory function for creating PersonService instances.

    Args:
        db: Database session (injected)

    Returns:
        IPersonService: Person service implementation
    """
    return PersonService(get_person_repository(db), get_area_repository(db))
