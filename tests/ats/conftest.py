"""Shared fixtures: in-memory SQLite database and an API test client."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import ats.models  # noqa: F401  (registers tables on Base.metadata)
from ats.database import Base, get_db
from ats.main import app

# ---------------------------------------------------------------------------
# In-memory SQLite test database (shared via StaticPool)
# ---------------------------------------------------------------------------
SQLALCHEMY_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    """Dependency override that uses the test in-memory database."""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def setup_db():
    """Create and tear down tables around each test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    """TestClient with the DB dependency overridden."""
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def db():
    """SQLAlchemy session for pre-populating test data."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def organization(client):
    """An organization created through the API."""
    response = client.post("/api/organizations", json={"name": "Acme Staffing"})
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def job(client, organization):
    """An OPEN job at ``organization``."""
    response = client.post(
        "/api/jobs",
        json={
            "organization_id": organization["organization_id"],
            "job_title": "Forklift Operator",
            "job_type": "TEMPORARY",
            "status": "OPEN",
            "location": "Reno, NV",
        },
    )
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def applicant(client):
    """An applicant created through the API."""
    response = client.post(
        "/api/applicants",
        json={"full_name": "Dana Reyes", "email": "dana.reyes@example.com"},
    )
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def make_application(client, job, applicant):
    """Factory creating an application for ``job``/``applicant`` with a given status."""

    def _make(status: str = "APPLIED") -> dict:
        response = client.post(
            "/api/applications",
            json={
                "job_id": job["job_id"],
                "applicant_id": applicant["applicant_id"],
                "status": status,
            },
        )
        assert response.status_code == 201
        return response.json()["data"]

    return _make
