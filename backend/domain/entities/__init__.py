"""
Domain Entities

Entities are business objects with identity and lifecycle.
They are mutable and have a unique identifier that persists through their lifetime.

Examples:
- Area entity: An organisational area
- Person entity: A registered persona belonging to one area
"""

from .area import Area
from .person import Person

__all__ = ["Area", "Person"]
