"""
Base Service.

Base class for all services providing common patterns for business logic.
Services orchestrate repositories, handle transactions, and implement
tree rules.

Usage:
    from notebook.services.base import BaseService

    class FolderService(BaseService):
        def __init__(self, session: Session) -> None:
            super().__init__(session)
            self.repo = FolderRepository(session)

        def rename(self, path: str, title: str) -> Folder:
            with self._transaction("rename_folder"):
                ...
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from notebook.core.exceptions import ConflictError, DatabaseError
from notebook.core.logging import get_logger


class BaseService:
    """
    Base class for all services.

    Provides:
    - Database session management
    - Atomic transactions around multi-row operations
    - Error wrapping for database operations
    - Logging context

    Subclasses should:
    - Call super().__init__(session) in their __init__
    - Initialize repositories in __init__
    - Run every public operation inside self._transaction(...)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize the service with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session
        self._logger = get_logger(self.__class__.__module__)

    @property
    def session(self) -> Session:
        """Get the database session."""
        return self._session

    @contextmanager
    def _transaction(self, operation: str) -> Iterator[Session]:
        """
        Run a block atomically.

        Opens a transaction when the session is idle and commits it on
        success. When the caller already holds a transaction, a SAVEPOINT
        is used so only this block is undone on failure. Any exception
        rolls back every row written inside the block.

        Args:
            operation: Description of the operation for logging

        Raises:
            ConflictError: For unique constraint violations
            DatabaseError: For other database errors
        """
        if self._session.in_transaction():
            scope = self._session.begin_nested()
        else:
            scope = self._session.begin()

        try:
            with scope:
                yield self._session
        except IntegrityError as e:
            self._logger.warning(
                "Database integrity error",
                extra={"operation": operation, "error": str(e)},
            )
            error_str = str(e).lower()
            if "unique" in error_str or "duplicate" in error_str:
                raise ConflictError("Resource already exists") from e
            raise DatabaseError(f"Database constraint violation: {operation}") from e
        except SQLAlchemyError as e:
            self._logger.error(
                "Database error",
                extra={"operation": operation, "error": str(e)},
            )
            raise DatabaseError(f"Database operation failed: {operation}") from e

    def _log_operation(
        self,
        operation: str,
        **context: Any,
    ) -> None:
        """
        Log a service operation with context.

        Args:
            operation: Description of the operation
            **context: Additional context to include in log
        """
        self._logger.info(
            operation,
            extra={"service": self.__class__.__name__, **context},
        )

    def _log_debug(
        self,
        message: str,
        **context: Any,
    ) -> None:
        """
        Log debug information.

        Args:
            message: Debug message
            **context: Additional context to include in log
        """
        self._logger.debug(
            message,
            extra={"service": self.__class__.__name__, **context},
        )
