"""Tests for AreaService business rules."""

import pytest

from domain.entities.area import Area
from exceptions import AreaInUseError, AreaNameTakenError, AreaNotFoundError


def test_create_rejects_duplicate_name(area_service):
    area_service.create(Area(nombre="Ventas"))

    with pytest.raises(AreaNameTakenError):
        area_service.create(Area(nombre="Ventas"))


def test_get_by_id_missing(area_service):
    with pytest.raises(AreaNotFoundError):
        area_service.get_by_id(1)


def test_update_missing_area(area_service):
    with pytest.raises(AreaNotFoundError):
        area_service.update(7, Area(nombre="Nada"))


def test_update_to_name_of_other_area(area_service):
    area_service.create(Area(nombre="Ventas"))
    soporte = area_service.create(Area(nombre="Soporte"))

    with pytest.raises(AreaNameTakenError):
        area_service.update(soporte.id, Area(nombre="Ventas"))


def test_update_keeping_own_name(area_service):
    ventas = area_service.create(Area(nombre="Ventas"))

    updated = area_service.update(ventas.id, Area(nombre="Ventas", descripcion="nueva"))

    assert updated.descripcion == "nueva"


def test_delete_rejected_while_personas_reference_area(area_service, make_person):
    area = area_service.create(Area(nombre="Ventas"))
    make_person(area.id)

    with pytest.raises(AreaInUseError) as exc_info:
        area_service.delete(area.id)

    assert exc_info.value.person_count == 1
    assert area_service.get_by_id(area.id).deleted_at is None


def test_delete_allowed_once_personas_are_deleted(area_service, make_person, person_repo):
    area = area_service.create(Area(nombre="Ventas"))
    person = make_person(area.id)
    person_repo.delete(person.id)

    area_service.delete(area.id)

    with pytest.raises(AreaNotFoundError):
        area_service.get_by_id(area.id)


def test_delete_twice(area_service):
    area = area_service.create(Area(nombre="Ventas"))
    area_service.delete(area.id)

    with pytest.raises(AreaNotFoundError):
        area_service.delete(area.id)


def test_get_areas_with_count(area_service, make_person):
    area = area_service.create(Area(nombre="Ventas"))
    make_person(area.id)

    rows = area_service.get_areas_with_count()

    assert len(rows) == 1
    assert rows[0].personas == 1
