"""
Integration Test Fixtures.

Fixtures for integration tests - real services over the per-test
SQLite database from the root conftest.py.
"""

import pytest
from sqlalchemy.orm import Session

from notebook.services.folder import FolderService
from notebook.services.note import NoteService
from notebook.services.resolver import PathResolver


@pytest.fixture
def resolver(db_session: Session) -> PathResolver:
    """PathResolver bound to the test session."""
    return PathResolver(db_session)


@pytest.fixture
def folders(db_session: Session) -> FolderService:
    """FolderService bound to the test session."""
    return FolderService(db_session)


@pytest.fixture
def notes(db_session: Session) -> NoteService:
    """NoteService bound to the test session."""
    return NoteService(db_session)
