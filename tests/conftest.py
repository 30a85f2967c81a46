from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.database import get_db
from app.db.base import Base
from app.main import app
from app.schemas.property import PropertyCreate, UnitIn
from app.schemas.tenant import TenantCreate
from app.services.property_service import PropertyService

TEST_DATABASE_URL = "sqlite://"

LANDLORD_ID = "landlord-1"


@pytest.fixture()
def engine():
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def property_p1(db):
    """P1 with two vacant units U1 and U2"""
    return PropertyService(db).create_property(PropertyCreate(
        landlord_id=LANDLORD_ID,
        name="Sunrise Apartments",
        location="Kilimani, Nairobi",
        units=[
            UnitIn(id="U1", name="A1", unit_type="1 Bedroom", rent=10000),
            UnitIn(id="U2", name="A2", unit_type="Bedsitter", rent=8000),
        ],
    ))


@pytest.fixture()
def tenant_payload():
    """Builder for a valid TenantCreate on (property_id, unit_id)"""
    def _build(property_id, unit_id, **overrides):
        today = date.today()
        fields = dict(
            name="Jane Wanjiku",
            email="jane@example.com",
            phone="0712345678",
            lease_start=today - timedelta(days=30),
            lease_end=today + timedelta(days=335),
            property_id=property_id,
            unit_id=unit_id,
        )
        fields.update(overrides)
        return TenantCreate(**fields)
    return _build
