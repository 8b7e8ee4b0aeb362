import os

# In-memory database and no table creation against the configured engine
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.database import Base, get_db, enable_sqlite_foreign_keys
from app.main import create_app
from app.models.firefighter import Firefighter
from app.models.resource import Resource
from app.models.resource_type import ResourceType
from app.models.vehicle_type import VehicleType


@pytest.fixture()
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(eng)
    Base.metadata.create_all(eng)
    yield eng
    Base.metadata.drop_all(eng)
    eng.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def client(session_factory):
    application = create_app()

    def _get_db():
        session = session_factory()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    application.dependency_overrides[get_db] = _get_db
    return TestClient(application)


# ─── Data helpers ─────────────────────────────────────────────────────────────
@pytest.fixture()
def firefighter(db):
    f = Firefighter(nombre="Juan", aPaterno="Pérez", aMaterno="Soto", telefono=987654321)
    db.add(f)
    db.commit()
    return f


@pytest.fixture()
def resource_type(db):
    t = ResourceType(nombre="Rescate")
    db.add(t)
    db.commit()
    return t


@pytest.fixture()
def vehicle_type(db):
    t = VehicleType(nombre="Bomba")
    db.add(t)
    db.commit()
    return t


@pytest.fixture()
def resource(db, resource_type):
    r = Resource(nombre="Botiquín", cantidad=10, estado="Disponible", tipoRecurso=resource_type)
    db.add(r)
    db.commit()
    return r
