"""Tests for PersonRepository: joined area, email lookup and constraints."""

import pytest

from domain.entities.person import Person
from exceptions import IntegrityViolationError, RecordNotFoundError


def test_create_attaches_area(make_area, person_repo):
    area = make_area("Ventas")

    person = person_repo.create(Person(nombre="Ana", email="ana@empresa.com", area_id=area.id))

    assert person.id is not None
    assert person.area is not None
    assert person.area.id == area.id
    assert person.area.nombre == "Ventas"


def test_unknown_area_is_a_foreign_key_violation(person_repo):
    with pytest.raises(IntegrityViolationError) as exc_info:
        person_repo.create(Person(nombre="Ana", email="ana@empresa.com", area_id=42))

    assert exc_info.value.constraint == IntegrityViolationError.FOREIGN_KEY


def test_duplicate_active_email_is_a_unique_violation(make_area, make_person, person_repo):
    area = make_area()
    make_person(area.id, email="ana@empresa.com")

    with pytest.raises(IntegrityViolationError) as exc_info:
        person_repo.create(Person(nombre="Otra", email="ana@empresa.com", area_id=area.id))

    assert exc_info.value.constraint == IntegrityViolationError.UNIQUE


def test_get_by_email(make_area, make_person, person_repo):
    area = make_area()
    created = make_person(area.id, email="ana@empresa.com")

    assert person_repo.get_by_email("ana@empresa.com").id == created.id
    with pytest.raises(RecordNotFoundError):
        person_repo.get_by_email("nadie@empresa.com")


def test_get_by_email_ignores_deleted(make_area, make_person, person_repo):
    area = make_area()
    created = make_person(area.id, email="ana@empresa.com")
    person_repo.delete(created.id)

    with pytest.raises(RecordNotFoundError):
        person_repo.get_by_email("ana@empresa.com")


def test_deleted_area_is_not_attached(make_area, make_person, person_repo, area_repo):
    area = make_area()
    person = make_person(area.id)
    # Bypass the in-use check to simulate a legacy row
    area_repo.delete(area.id)

    reloaded = person_repo.get_by_id(person.id)

    assert reloaded.area_id == area.id
    assert reloaded.area is None


def test_update_replaces_fields(make_area, make_person, person_repo):
    ventas = make_area("Ventas")
    soporte = make_area("Soporte")
    person = make_person(ventas.id)

    updated = person_repo.update(
        Person(id=person.id, nombre="Ana María", email="anamaria@empresa.com", area_id=soporte.id)
    )

    assert updated.id == person.id
    assert updated.created_at == person.created_at
    assert updated.email == "anamaria@empresa.com"
    assert updated.area.nombre == "Soporte"


def test_count_by_area(make_area, make_person, person_repo):
    area = make_area()
    make_person(area.id, email="a@empresa.com")
    gone = make_person(area.id, email="b@empresa.com")
    person_repo.delete(gone.id)

    assert person_repo.count_by_area(area.id) == 1
