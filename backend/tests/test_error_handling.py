"""Tests for error translation: storage failures and identifier parsing."""

import pytest

from dependencies import get_area_service, get_person_service
from exceptions import DatabaseError, InvalidIdentifierError
from utils.error_handlers import parse_id

API = "/api/v1"


class _BrokenService:
    """Service double whose every call fails in the storage layer"""

    def __getattr__(self, name):
        def _fail(*args, **kwargs):
            raise DatabaseError(name, "connection reset by peer")
        return _fail


@pytest.fixture
def broken_client(client):
    from main import app

    app.dependency_overrides[get_area_service] = lambda: _BrokenService()
    app.dependency_overrides[get_person_service] = lambda: _BrokenService()
    return client


@pytest.mark.parametrize("method,path,error", [
    ("get", "/areas", "Error al obtener las áreas"),
    ("get", "/areas/conteo", "Error al obtener las áreas con conteo"),
    ("get", "/areas/1", "Error al obtener el área"),
    ("delete", "/areas/1", "Error al eliminar el área"),
    ("get", "/personas", "Error al obtener las personas"),
    ("get", "/personas/email/ana@empresa.com", "Error al obtener la persona"),
    ("delete", "/personas/1", "Error al eliminar la persona"),
])
def test_storage_failure_is_internal_error(broken_client, method, path, error):
    resp = getattr(broken_client, method)(f"{API}{path}")

    assert resp.status_code == 500
    body = resp.json()
    assert body["error"] == error
    # Driver messages are not leaked
    assert body["details"] == "error interno de base de datos"


def test_storage_failure_on_create(broken_client):
    resp = broken_client.post(f"{API}/areas", json={"nombre": "Ventas"})

    assert resp.status_code == 500
    assert resp.json()["error"] == "Error al crear el área"


@pytest.mark.parametrize("raw,expected", [
    ("0", 0),
    ("1", 1),
    ("007", 7),
    ("4294967295", 4294967295),
])
def test_parse_id_accepts_unsigned_32_bit(raw, expected):
    assert parse_id(raw) == expected


@pytest.mark.parametrize("raw", ["", "abc", "-1", "+1", "1e3", " 1", "4294967296", "١٢"])
def test_parse_id_rejects(raw):
    with pytest.raises(InvalidIdentifierError):
        parse_id(raw)
