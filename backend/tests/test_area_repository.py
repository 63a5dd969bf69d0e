"""Tests for AreaRepository: soft delete, uniqueness and persona counts."""

import pytest

from domain.entities.area import Area
from domain.value_objects.record_state import RecordState
from exceptions import IntegrityViolationError, RecordNotFoundError


def test_create_assigns_id_and_timestamps(area_repo):
    area = area_repo.create(Area(nombre="Ventas", descripcion="Equipo comercial"))

    assert area.id is not None
    assert area.nombre == "Ventas"
    assert area.descripcion == "Equipo comercial"
    assert area.created_at is not None
    assert area.updated_at is not None
    assert area.deleted_at is None
    assert area.state is RecordState.ACTIVE


def test_get_all_empty_table_returns_empty_list(area_repo):
    assert area_repo.get_all() == []


def test_get_all_is_ordered_by_id(make_area, area_repo):
    first = make_area("Ventas")
    second = make_area("Soporte")

    assert [a.id for a in area_repo.get_all()] == [first.id, second.id]


def test_duplicate_active_name_is_a_unique_violation(make_area, area_repo):
    make_area("Ventas")

    with pytest.raises(IntegrityViolationError) as exc_info:
        area_repo.create(Area(nombre="Ventas"))

    assert exc_info.value.constraint == IntegrityViolationError.UNIQUE


def test_session_usable_after_integrity_error(make_area, area_repo):
    make_area("Ventas")
    with pytest.raises(IntegrityViolationError):
        area_repo.create(Area(nombre="Ventas"))

    assert area_repo.create(Area(nombre="Soporte")).id is not None


def test_deleted_area_name_can_be_reused(make_area, area_repo):
    old = make_area("Ventas")
    area_repo.delete(old.id)

    reused = area_repo.create(Area(nombre="Ventas"))

    assert reused.id != old.id


def test_update_preserves_identity_and_created_at(make_area, area_repo):
    area = make_area("Ventas", "antes")

    updated = area_repo.update(Area(id=area.id, nombre="Comercial", descripcion="después"))

    assert updated.id == area.id
    assert updated.created_at == area.created_at
    assert updated.nombre == "Comercial"
    assert updated.descripcion == "después"
    assert updated.updated_at >= area.updated_at


def test_update_missing_area_raises(area_repo):
    with pytest.raises(RecordNotFoundError):
        area_repo.update(Area(id=999, nombre="Nada"))


def test_delete_hides_area_from_reads(make_area, area_repo):
    area = make_area("Ventas")

    area_repo.delete(area.id)

    assert area_repo.get_all() == []
    assert not area_repo.exists(area.id)
    with pytest.raises(RecordNotFoundError):
        area_repo.get_by_id(area.id)


def test_deleted_area_visible_with_include_deleted(make_area, area_repo):
    area = make_area("Ventas")
    area_repo.delete(area.id)

    everything = area_repo.get_all(include_deleted=True)
    assert len(everything) == 1
    assert everything[0].state is RecordState.DELETED
    assert area_repo.get_by_id(area.id, include_deleted=True).deleted_at is not None


def test_delete_twice_raises_not_found(make_area, area_repo):
    area = make_area("Ventas")
    area_repo.delete(area.id)

    with pytest.raises(RecordNotFoundError):
        area_repo.delete(area.id)


def test_get_all_with_count_counts_active_personas_only(make_area, make_person, person_repo, area_repo):
    ventas = make_area("Ventas")
    soporte = make_area("Soporte")
    make_person(ventas.id, email="a@empresa.com")
    make_person(ventas.id, email="b@empresa.com")
    gone = make_person(ventas.id, email="c@empresa.com")
    person_repo.delete(gone.id)

    counts = {row.nombre: row.personas for row in area_repo.get_all_with_count()}

    assert counts == {"Ventas": 2, "Soporte": 0}


def test_get_all_with_count_skips_deleted_areas(make_area, area_repo):
    make_area("Ventas")
    gone = make_area("Soporte")
    area_repo.delete(gone.id)

    rows = area_repo.get_all_with_count()

    assert [r.nombre for r in rows] == ["Ventas"]
