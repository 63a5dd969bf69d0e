"""Tests for domain value objects and entities."""

from datetime import datetime

import pytest

from domain.entities.area import Area
from domain.entities.person import Person
from domain.value_objects import AreaWithCount, RecordState


def test_record_state_transitions():
    assert RecordState.ACTIVE.can_transition_to(RecordState.ACTIVE)
    assert RecordState.ACTIVE.can_transition_to(RecordState.DELETED)
    assert not RecordState.DELETED.can_transition_to(RecordState.ACTIVE)
    assert not RecordState.DELETED.can_transition_to(RecordState.DELETED)
    assert RecordState.DELETED.is_terminal()


def test_state_follows_deleted_at():
    area = Area(nombre="Ventas")
    assert area.state is RecordState.ACTIVE

    area.deleted_at = datetime.utcnow()
    assert area.state is RecordState.DELETED


def test_person_owns_email():
    person = Person(nombre="Ana", email="ana@empresa.com", area_id=1)

    assert person.owns_email("ana@empresa.com")
    assert not person.owns_email("luis@empresa.com")


def test_area_with_count_rejects_negative():
    with pytest.raises(ValueError):
        AreaWithCount(id=1, nombre="Ventas", descripcion="", personas=-1)
