"""Pytest fixtures for the room rental services."""

import os

# Must be set before shared.core.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ.setdefault("JWT_SECRET", "test-secret")

from collections.abc import Callable, Generator
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from shared.core.auth import create_access_token
from shared.core.database import Base, SessionLocal, engine
from shared.models.users import Users
from auth_service.app.main import app as auth_app
from rental_service.app.main import app as rental_app
from rental_service.app.crud.leasing_tenants import tenants_crud
from rental_service.app.crud.space_sites import spaces_crud
from rental_service.app.schemas.leasing_tenants.tenants_schemas import TenantCreate
from rental_service.app.schemas.space_sites.spaces_schemas import SpaceCreate


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_schema() -> Generator[None, None, None]:
    """Give every test an empty schema."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db() -> Generator[Session, None, None]:
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# Factories
# =============================================================================


@pytest.fixture
def make_user(db: Session) -> Callable[..., Users]:
    counter = {"n": 0}

    def _make_user(first_name: str = "Test", last_name: str = "User",
                   email: str | None = None, password: str = "secret123") -> Users:
        counter["n"] += 1
        user = Users(
            email=email or f"user{counter['n']}@example.com",
            first_name=first_name,
            last_name=last_name,
        )
        user.set_password(password)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def host(make_user) -> Users:
    return make_user(first_name="Hanna", last_name="Host", email="host@example.com")


@pytest.fixture
def renter(make_user) -> Users:
    return make_user(first_name="Uma", last_name="Renter", email="renter@example.com")


@pytest.fixture
def space_payload() -> dict:
    return {
        "title": "Sunny room",
        "description": "Quiet room near the park",
        "space_type": "room",
        "capacity": 2,
        "street_address": "12 Main St",
        "city": "Springfield",
        "state": "IL",
        "zip_code": "62701",
        "country": "US",
    }


@pytest.fixture
def make_space(db: Session, space_payload: dict):
    def _make_space(host_id, **overrides):
        return spaces_crud.create_space(
            db, host_id, SpaceCreate(**{**space_payload, **overrides}))

    return _make_space


@pytest.fixture
def make_tenant(db: Session):
    def _make_tenant(host_id, space_id, **overrides):
        data = {
            "first_name": "Tom",
            "last_name": "Tenant",
            "email": "tom@example.com",
            "space_id": space_id,
            "start_date": date(2024, 1, 1),
            "end_date": date(2024, 6, 1),
            "rent_amount": 500,
        }
        data.update(overrides)
        return tenants_crud.create_tenant(db, host_id, TenantCreate(**data))

    return _make_tenant


# =============================================================================
# HTTP Fixtures
# =============================================================================


@pytest.fixture
def rental_client() -> TestClient:
    return TestClient(rental_app)


@pytest.fixture
def auth_client() -> TestClient:
    return TestClient(auth_app)


@pytest.fixture
def auth_headers() -> Callable[[Users], dict]:
    def _auth_headers(user: Users) -> dict:
        return {"Authorization": f"Bearer {create_access_token(user)}"}

    return _auth_headers
