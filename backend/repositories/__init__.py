"""
Repository layer for data access abstraction.

This package contains repository classes that encapsulate database queries
and provide a clean interface for data access operations.
"""

from .base_repository import BaseRepository
from .area_repository import AreaRepository
from .person_repository import PersonRepository

__all__ = [
    "BaseRepository",
    "AreaRepository",
    "PersonRepository",
]
