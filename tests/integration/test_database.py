"""
Integration Tests for Database Session Management.

Exercises the lazily created engine against a temporary SQLite file
selected through NOTEBOOK_DATABASE_URL.
"""

from collections.abc import Generator

import pytest
from sqlalchemy import inspect

from notebook.core import database
from notebook.core.config import get_app_config, get_settings
from notebook.services.folder import FolderService


@pytest.fixture
def file_database(tmp_path, monkeypatch) -> Generator[str, None, None]:
    """Point the application at a fresh SQLite file."""
    db_file = tmp_path / "nested" / "notebook.db"
    monkeypatch.setenv("NOTEBOOK_DATABASE_URL", f"sqlite:///{db_file}")
    get_settings.cache_clear()
    get_app_config.cache_clear()
    database.reset_engine()

    yield str(db_file)

    database.reset_engine()
    get_settings.cache_clear()
    get_app_config.cache_clear()


class TestEngine:
    """Tests for lazy engine creation."""

    def test_engine_is_cached(self, file_database):
        assert database.get_engine() is database.get_engine()

    def test_parent_directory_is_created(self, file_database, tmp_path):
        database.get_engine()

        assert (tmp_path / "nested").is_dir()

    def test_init_db_creates_tables(self, file_database):
        database.init_db()

        tables = set(inspect(database.get_engine()).get_table_names())
        assert {"folders", "notes"} <= tables


class TestSessionScope:
    """Tests for the unit-of-work helper."""

    def test_changes_persist_across_scopes(self, file_database):
        database.init_db()

        with database.session_scope() as session:
            FolderService(session).make("/journal/2024", create_parents=True)

        with database.session_scope() as session:
            children, _ = FolderService(session).list("/journal")
            assert [f.title for f in children] == ["2024"]

    def test_exception_propagates(self, file_database):
        database.init_db()

        with pytest.raises(ValueError):
            with database.session_scope() as session:
                FolderService(session).make("/journal")
                raise ValueError("caller failure")

        with database.session_scope() as session:
            children, _ = FolderService(session).list("/")
            assert [f.title for f in children] == ["journal"]
