import inspect
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date

import anyio
import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from user_service.core.settings import Settings, get_settings
from user_service.db.engine import get_session, register_sqlite_functions
from user_service.main import app
from user_service.user.models import MembershipType, User
from user_service.user.repository import UserRepository
from user_service.user.service import UserService


def pytest_configure(config: pytest.Config) -> None:
    # Tests use @pytest.mark.asyncio, but we intentionally rely on anyio.
    config.addinivalue_line(
        "markers",
        "asyncio: run async tests using anyio (project-local hook)",
    )


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Run @pytest.mark.asyncio tests with anyio.

    This avoids adding an external pytest-asyncio dependency.
    """
    if pyfuncitem.get_closest_marker("asyncio") is None:
        return None

    test_func = pyfuncitem.obj
    if not inspect.iscoroutinefunction(test_func):
        return None

    funcargs = {
        name: pyfuncitem.funcargs[name] for name in pyfuncitem._fixtureinfo.argnames
    }

    async def _run_async_test() -> None:
        await test_func(**funcargs)

    anyio.run(_run_async_test)
    return True


@contextmanager
def memory_session() -> Iterator[Session]:
    """Fresh in-memory SQLite database with the users table."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    register_sqlite_functions(engine)
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()


def add_user(session: Session, **fields) -> User:
    """Insert a user row directly, bypassing UserService defaults."""
    values = {
        "name": "Test User",
        "email": "test@example.com",
        "membership_type": MembershipType.BASIC,
        "is_active": True,
        "registration_date": date(2024, 1, 15),
    }
    values.update(fields)
    user = User(**values)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture(name="session_factory")
def session_factory_fixture():
    """Factory for isolated databases (one per Hypothesis example)."""
    return memory_session


@pytest.fixture(name="session")
def session_fixture():
    """Create an in-memory SQLite database for testing."""
    with memory_session() as session:
        yield session


@pytest.fixture(name="make_user")
def make_user_fixture(session: Session):
    """Insert users with arbitrary field values into the test database."""

    def _make_user(**fields) -> User:
        return add_user(session, **fields)

    return _make_user


@pytest.fixture(name="repository")
def repository_fixture(session: Session) -> UserRepository:
    return UserRepository(session)


@pytest.fixture(name="service")
def service_fixture(repository: UserRepository) -> UserService:
    return UserService(repository)


@pytest.fixture(name="test_user")
def test_user_fixture(session: Session) -> User:
    """Active PREMIUM patron."""
    return add_user(
        session,
        name="Juan Pérez",
        email="juan.perez@email.com",
        membership_type=MembershipType.PREMIUM,
        phone="555-0101",
        address="Calle Mayor 1",
    )


@pytest.fixture(name="inactive_user")
def inactive_user_fixture(session: Session) -> User:
    """Inactive BASIC patron."""
    return add_user(
        session,
        name="Ana García",
        email="ana.garcia@email.com",
        membership_type=MembershipType.BASIC,
        is_active=False,
        registration_date=date(2024, 3, 1),
    )


@pytest.fixture(name="mock_settings")
def mock_settings_fixture() -> Settings:
    """Create test settings."""
    return Settings(
        env_name="test",
        database_url="sqlite://",
        service_name="User Service",
        port=8082,
    )


@pytest.fixture(name="client")
def client_fixture(session: Session, mock_settings: Settings):
    """Create a test client with overridden dependencies."""

    def get_session_override():
        return session

    def get_settings_override():
        return mock_settings

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_settings] = get_settings_override

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()
