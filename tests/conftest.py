"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("BCRYPT_WORK_FACTOR", "4")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.models.message import Message  # noqa: F401
from app.models.user import User  # noqa: F401
from app.services.credentials import CredentialService
from app.services.tokens import get_token_service


@pytest.fixture(name="db_session")
def db_session_fixture():
    """Create an in-memory SQLite database for tests."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    testing_session_local = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = testing_session_local()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(name="client")
def client_fixture(db_session: Session):
    """Create a test client with overridden DB dependency."""
    from main import app

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture(name="credentials")
def credentials_fixture() -> CredentialService:
    return CredentialService(work_factor=4)


@pytest.fixture(name="make_user")
def make_user_fixture(db_session: Session, credentials: CredentialService):
    """Factory that registers a user and returns (user_data, token)."""

    def _make_user(username: str, password: str = "password123") -> dict:
        user = credentials.register(db_session, username, password, username.title(), "Tester", "555-0100")
        return {
            "username": user.username,
            "password": password,
            "token": get_token_service().issue(user.username),
        }

    return _make_user


@pytest.fixture(name="alice")
def alice_fixture(make_user) -> dict:
    return make_user("alice")


@pytest.fixture(name="bob")
def bob_fixture(make_user) -> dict:
    return make_user("bob")


@pytest.fixture(name="carol")
def carol_fixture(make_user) -> dict:
    return make_user("carol")

