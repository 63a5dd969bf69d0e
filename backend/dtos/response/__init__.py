"""
Response DTOs

DTOs for outgoing API responses. These decouple the API from database models
and provide a clear contract for what data the API returns.

Benefits:
- Hide internal database structure
- Control exactly what data is exposed
- Add computed/derived fields without modifying models
- Version API responses independently
"""

from .area_response import AreaResponse, AreaWithCountResponse
from .person_response import PersonResponse
from .envelope import DataResponse, MessageResponse, DeletedRecord, ErrorResponse

__all__ = [
    "AreaResponse",
    "AreaWithCountResponse",
    "PersonResponse",
    "DataResponse",
    "MessageResponse",
    "DeletedRecord",
    "ErrorResponse",
]
