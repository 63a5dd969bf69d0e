import os
import sys
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# The app builds its engine at import time; point it at SQLite before that
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("LOG_DIR", None)

# Now import after path is set
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from database import Base, get_db, make_engine, make_sessionmaker
from domain.entities.area import Area
from domain.entities.person import Person
from repositories.area_repository import AreaRepository
from repositories.person_repository import PersonRepository
from services.area_service import AreaService
from services.person_service import PersonService
import models  # noqa: F401  registers tables on Base.metadata


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across threads for the whole test"""
    test_engine = make_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(test_engine)
    yield test_engine
    Base.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture
def db_session(engine):
    """Create in-memory database for testing"""
    SessionLocal = make_sessionmaker(engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def area_repo(db_session):
    return AreaRepository(db_session)


@pytest.fixture
def person_repo(db_session):
    return PersonRepository(db_session)


@pytest.fixture
def area_service(area_repo, person_repo):
    return AreaService(area_repo, person_repo)


@pytest.fixture
def person_service(person_repo, area_repo):
    return PersonService(person_repo, area_repo)


@pytest.fixture
def make_area(area_repo):
    """Factory storing an area directly through the repository"""
    def _make(nombre="Ventas", descripcion=""):
        return area_repo.create(Area(nombre=nombre, descripcion=descripcion))
    return _make


@pytest.fixture
def make_person(person_repo):
    """Factory storing a persona directly through the repository"""
    def _make(area_id, nombre="Ana Pérez", email="ana@empresa.com"):
        return person_repo.create(Person(nombre=nombre, email=email, area_id=area_id))
    return _make


@pytest.fixture
def client(db_session):
    """TestClient bound to the test session.

    Used without a ``with`` block so the lifespan (database wait and schema
    setup against the configured server) does not run.
    """
    from main import app

    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
