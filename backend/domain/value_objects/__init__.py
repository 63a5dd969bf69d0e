"""
Domain Value Objects

Value objects are immutable types that represent descriptive aspects of the domain.
They have no conceptual identity and are compared by their values, not by ID.

Examples:
- RecordState: Lifecycle state of a stored record (active / deleted)
- AreaWithCount: Area projection with its active persona count
"""

from .record_state import RecordState
from .area_with_count import AreaWithCount

__all__ = ["RecordState", "AreaWithCount"]
