"""
Database Configuration.

SQLAlchemy engine and session management.
Uses lazy initialization to prevent import-time failures when the
configuration is not in place yet.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker

from notebook.core.logging import get_logger

logger = get_logger(__name__)

# Module-level state for lazy initialization
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def configure_sqlite(engine: Engine, busy_timeout_ms: int = 5000) -> None:
    """
    Make pysqlite transactions explicit.

    The driver otherwise opens transactions lazily and commits around DDL,
    which breaks SAVEPOINT based rollback. BEGIN is emitted by SQLAlchemy
    instead, and every connection gets a busy timeout.

    Args:
        engine: Engine bound to a SQLite database
        busy_timeout_ms: How long a connection waits on a locked database
    """

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection: Any, connection_record: Any) -> None:
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute(f"PRAGMA busy_timeout = {int(busy_timeout_ms)}")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn: Any) -> None:
        conn.exec_driver_sql("BEGIN")


def _create_engine() -> Engine:
    """Create the SQLAlchemy engine from configuration."""
    from notebook.core.config import get_app_config, get_database_url

    url = make_url(get_database_url())
    db_config = get_app_config().database

    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(url, echo=db_config.echo)
    if engine.dialect.name == "sqlite":
        configure_sqlite(engine, busy_timeout_ms=db_config.busy_timeout_ms)

    logger.debug("Database engine created", extra={"url": url.render_as_string(hide_password=True)})
    return engine


def get_engine() -> Engine:
    """
    Get the database engine, creating it on first use.

    Returns:
        SQLAlchemy engine instance
    """
    global _engine
    if _engine is None:
        _engine = _create_engine()
    return _engine


def get_session_factory() -> sessionmaker[Session]:
    """
    Get the session factory, creating it on first use.

    Returns:
        SQLAlchemy session factory
    """
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(
            get_engine(),
            class_=Session,
            expire_on_commit=False,
        )
    return _session_factory


def init_db(engine: Engine | None = None) -> None:
    """
    Create the folder and note tables if they do not exist.

    Deployed databases should be upgraded with Alembic instead; this is
    meant for fresh local stores and tests.
    """
    from notebook.models.base import Base
    from notebook.models import folder, note  # noqa: F401

    target = engine or get_engine()
    Base.metadata.create_all(target)
    logger.info("Database tables ensured")


def reset_engine() -> None:
    """Dispose the cached engine and session factory."""
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


@contextmanager
def session_scope() -> Iterator[Session]:
    """
    Provide a session for a unit of work.

    Usage:
        with session_scope() as session:
            FolderService(session).make("/journal/2024", create_parents=True)
    """
    session_factory = get_session_factory()
    with session_factory() as session:
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
