import logging
from collections.abc import Generator
from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from user_service.core.settings import get_settings

logger = logging.getLogger(__name__)


def _unicode_lower(value: Any) -> Any:
    return value.lower() if isinstance(value, str) else value


def register_sqlite_functions(target: Engine) -> None:
    """Replace SQLite's ASCII-only ``lower()`` on every new connection.

    ``ilike`` compiles to ``lower(x) LIKE lower(y)`` on SQLite, so name
    search folds accented letters such as ``É`` only with this override.
    """

    @event.listens_for(target, "connect")
    def _on_connect(dbapi_conn: Any, _: Any) -> None:
        dbapi_conn.create_function("lower", 1, _unicode_lower, deterministic=True)


_settings = get_settings()

connect_args: dict[str, object] = {}
if _settings.database_url.startswith("sqlite"):
    # Required for SQLite when used with FastAPI across threads.
    connect_args = {"check_same_thread": False}

engine = create_engine(_settings.database_url, echo=False, connect_args=connect_args)
if engine.dialect.name == "sqlite":
    register_sqlite_functions(engine)


def init_db() -> None:
    """Create missing tables. Alembic owns schema changes after the first run."""
    # Registers the table models on SQLModel.metadata.
    import user_service.models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.info("Database tables ready (%s)", engine.url.render_as_string())


def get_session() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session
