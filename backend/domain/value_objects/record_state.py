"""
RecordState Value Object

Lifecycle state of an area or persona record.
"""

from enum import Enum


class RecordState(str, Enum):
    """
    Lifecycle of a stored record:

        nonexistent -> active (create) -> active (update)* -> deleted (delete)

    Deleted is terminal: nothing brings a soft-deleted record back.
    """

    ACTIVE = "active"
    DELETED = "deleted"

    def is_terminal(self) -> bool:
        """Check if this state is terminal (no further transitions)."""
        return self is RecordState.DELETED

    def can_transition_to(self, new_state: "RecordState") -> bool:
        """
        Check if transition to new state is valid.

        Args:
            new_state: Target state

        Returns:
            True if transition is allowed
        """
        valid_transitions = {
            RecordState.ACTIVE: {RecordState.ACTIVE, RecordState.DELETED},
            RecordState.DELETED: set(),
        }

        return new_state in valid_transitions.get(self, set())

    @classmethod
    def from_deleted_at(cls, deleted_at) -> "RecordState":
        """Derive the state from a soft-delete timestamp."""
        return cls.DELETED if deleted_at is not None else cls.ACTIVE
