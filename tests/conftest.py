"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Test Database Configuration:
    Each test gets a fresh in-memory SQLite database with the folder and
    note tables created, so no test can see another test's rows.
"""

from collections.abc import Generator

import pytest
from sqlalchemy import Engine, create_engine, select
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from notebook.core.database import configure_sqlite, init_db
from notebook.models.folder import Folder
from notebook.models.note import Note


# =============================================================================
# Database Engine Fixtures
# =============================================================================


@pytest.fixture
def db_engine() -> Generator[Engine, None, None]:
    """
    Create an in-memory SQLite engine with tables created.

    StaticPool keeps the single in-memory connection alive for the
    lifetime of the engine.
    """
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    configure_sqlite(engine)
    init_db(engine)

    yield engine

    engine.dispose()


@pytest.fixture
def db_session_factory(db_engine: Engine) -> sessionmaker[Session]:
    """Create a session factory bound to the test engine."""
    return sessionmaker(db_engine, class_=Session, expire_on_commit=False)


# =============================================================================
# Database Session Fixtures
# =============================================================================


@pytest.fixture
def db_session(
    db_session_factory: sessionmaker[Session],
) -> Generator[Session, None, None]:
    """
    Provide a database session for a single test.

    Services commit their own transactions; isolation comes from the
    per-test database.

    Usage:
        def test_make(db_session: Session):
            FolderService(db_session).make("/journal")
    """
    with db_session_factory() as session:
        yield session


# =============================================================================
# Store Inspection
# =============================================================================


def snapshot(session: Session) -> tuple[list[tuple], list[tuple]]:
    """
    Return every folder and note row as plain tuples, sorted.

    Compares the full store before and after an operation that must not
    change anything.
    """
    session.expire_all()
    folders = session.execute(
        select(Folder.id, Folder.parent_id, Folder.title).order_by(Folder.id)
    ).all()
    notes = session.execute(
        select(Note.id, Note.parent_id, Note.title, Note.body).order_by(Note.id)
    ).all()
    session.rollback()
    return [tuple(row) for row in folders], [tuple(row) for row in notes]


@pytest.fixture
def store_snapshot():
    """Provide the snapshot helper to tests."""
    return snapshot
