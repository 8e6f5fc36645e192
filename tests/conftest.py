"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Seeded companies, jobs and users
- Auth headers for admin and regular users
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.core.security import create_access_token
from app.crud import user as user_crud
from app.models.company import Company
from app.models.job import Job
from app.schemas.user import UserRegisterRequest
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@event.listens_for(engine, "connect")
def _enable_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores REFERENCES / ON DELETE CASCADE unless asked
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
def db_session():
    """
    Create a fresh database for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def companies(db_session):
    """Three companies: c1 (1 employee), c2 (2), c3 (3)."""
    rows = [
        Company(handle=f"c{n}", name=f"C{n}", description=f"Desc{n}",
                num_employees=n, logo_url=f"http://c{n}.img")
        for n in (1, 2, 3)
    ]
    db_session.add_all(rows)
    db_session.commit()
    return [row.handle for row in rows]


@pytest.fixture
def jobs(db_session, companies):
    """
    Four jobs; returns {title: id}.

    Equity: Backend Engineer 0.05, Data Analyst 0, Engineering Manager 0.1,
    Frontend Engineer none.
    """
    rows = [
        Job(title="Backend Engineer", salary=150000, equity=0.05, company_handle="c1"),
        Job(title="Data Analyst", salary=90000, equity=0, company_handle="c1"),
        Job(title="Frontend Engineer", salary=120000, equity=None, company_handle="c2"),
        Job(title="Engineering Manager", salary=180000, equity=0.1, company_handle="c2"),
    ]
    db_session.add_all(rows)
    db_session.commit()
    return {row.title: row.id for row in rows}


def _make_user(db_session, username: str, is_admin: bool):
    return user_crud.register(
        db_session,
        UserRegisterRequest(
            username=username,
            password="password1",
            first_name=username.title(),
            last_name="Tester",
            email=f"{username}@example.com",
        ),
        is_admin=is_admin,
    )


@pytest.fixture
def admin_user(db_session):
    return _make_user(db_session, "admin", is_admin=True)


@pytest.fixture
def regular_user(db_session):
    return _make_user(db_session, "u1", is_admin=False)


@pytest.fixture
def admin_headers(admin_user):
    token = create_access_token({"sub": admin_user["username"], "is_admin": True})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers(regular_user):
    token = create_access_token({"sub": regular_user["username"], "is_admin": False})
    return {"Authorization": f"Bearer {token}"}
