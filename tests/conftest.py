"""Pytest configuration and fixtures."""

import os
import tempfile
from datetime import UTC, datetime, timedelta

# Settings are read at import time, so the test environment goes first
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="snippet-vault-uploads-"))

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from snippet_vault import models  # noqa: E402, F401
from snippet_vault.database import Base, build_engine, get_db  # noqa: E402
from snippet_vault.main import app  # noqa: E402
from snippet_vault.services.credentials import CredentialStore, PasswordHasher  # noqa: E402
from snippet_vault.services.gate import AuthGate  # noqa: E402
from snippet_vault.services.tokens import TokenCodec  # noqa: E402


class AuthHeaders(dict):
    """Dict subclass that also stores the user's id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


class FakeClock:
    """Controllable replacement for the wall clock."""

    def __init__(self, now: datetime | None = None):
        self.now = now or datetime(2026, 1, 15, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


# Use TEST_DATABASE_URL when given (e.g. PostgreSQL in Docker), otherwise SQLite
SQLALCHEMY_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test.db")

engine = build_engine(SQLALCHEMY_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def session_factory():
    """Factory for extra sessions, e.g. one per thread."""
    return TestingSessionLocal


@pytest.fixture
def hasher():
    """Password hasher at the minimum bcrypt cost."""
    return PasswordHasher(rounds=4)


@pytest.fixture
def clock():
    """Fake clock shared by the codec under test."""
    return FakeClock()


@pytest.fixture
def codec(clock):
    """Token codec driven by the fake clock."""
    return TokenCodec("test-secret", clock=clock)


@pytest.fixture
def store(db, hasher):
    """Credential store on the test session."""
    return CredentialStore(db, hasher)


@pytest.fixture
def gate(codec, store):
    """Authorization gate wired to the test codec and store."""
    return AuthGate(codec, store)


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register_user(client, email: str, password: str = "testpass123", name: str = "Test User"):
    """Register through the API and return bearer headers for the new user."""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": email, "password": password, "name": name},
    )
    assert response.status_code == 201
    data = response.json()
    # Header auth only; the cookie jar would otherwise mix users up
    client.cookies.clear()
    return AuthHeaders(
        {"Authorization": f"Bearer {data['access_token']}"},
        user_id=data["user"]["id"],
        email=data["user"]["email"],
    )


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return register_user(client, "test@example.com")


@pytest.fixture
def other_auth_headers(client):
    """Create a second, unrelated user."""
    return register_user(client, "other@example.com", name="Other User")
