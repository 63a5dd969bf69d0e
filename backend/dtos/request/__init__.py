"""
Request DTOs

DTOs for incoming API requests. These decouple the API from database models
and provide a clear contract for what data the API expects.

Benefits:
- Validation at API boundary
- Independent of database schema
- Clear API documentation
- Type safety
"""

from .area_request import AreaRequest
from .person_request import PersonRequest

__all__ = ["AreaRequest", "PersonRequest"]
