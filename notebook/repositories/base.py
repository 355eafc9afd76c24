"""
Base Repository.

Base class for tree repositories. Every row is addressed either by id or
by its (parent_id, title) pair.

Finders always refresh matched rows from the store, so an object held by
the session from an earlier operation never shadows a newer write.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import Select, delete, select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from notebook.core.exceptions import DatabaseError, NotFoundError
from notebook.models.base import Base, new_id

ModelType = TypeVar("ModelType", bound=Base)

_UPSERT_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


class BaseRepository(Generic[ModelType]):
    """
    Base repository with the row operations the tree engines rely on.

    Subclasses should set the model class:

        class FolderRepository(BaseRepository[Folder]):
            model = Folder
    """

    model: type[ModelType]

    def __init__(self, session: Session) -> None:
        self.session = session

    def _select(self) -> Select:
        return select(self.model).execution_options(populate_existing=True)

    def find_child(self, parent_id: str, title: str) -> ModelType | None:
        """Get the record with the given title under parent_id, if any."""
        return self.session.execute(
            self._select()
            .where(self.model.parent_id == parent_id)
            .where(self.model.title == title)
        ).scalar_one_or_none()

    def get_child(self, parent_id: str, title: str) -> ModelType:
        """
        Get the record with the given title under parent_id.

        Raises:
            NotFoundError: If no such record exists
        """
        instance = self.find_child(parent_id, title)
        if instance is None:
            raise NotFoundError(f"{self.model.__name__} {title!r} not found")
        return instance

    def list_children(self, parent_id: str) -> list[ModelType]:
        """Get every record whose parent is parent_id, ordered by title."""
        result = self.session.execute(
            self._select()
            .where(self.model.parent_id == parent_id)
            .order_by(self.model.title)
        )
        return list(result.scalars().all())

    def has_children(self, parent_id: str) -> bool:
        """Check whether any record lives under parent_id."""
        result = self.session.execute(
            select(self.model.id).where(self.model.parent_id == parent_id).limit(1)
        )
        return result.first() is not None

    def insert_if_absent(self, parent_id: str, title: str, **values: Any) -> ModelType:
        """
        Insert a row unless (parent_id, title) is taken, then read it back.

        The read is authoritative: when another writer got there first,
        its row is returned instead of failing.
        """
        dialect = self.session.get_bind().dialect.name
        insert = _UPSERT_INSERTS.get(dialect)
        if insert is None:
            raise DatabaseError(f"Insert-if-absent is not supported on {dialect}")

        stmt = (
            insert(self.model)
            .values(id=new_id(), parent_id=parent_id, title=title, **values)
            .on_conflict_do_nothing()
        )
        self.session.execute(stmt)
        return self.get_child(parent_id, title)

    def update_by_id(self, id: str, **fields: Any) -> int:
        """Update fields of the record with the given ID. Returns rows affected."""
        result = self.session.execute(
            update(self.model).where(self.model.id == id).values(**fields)
        )
        return result.rowcount

    def delete_by_id(self, id: str) -> int:
        """Delete the record with the given ID. Returns rows affected."""
        result = self.session.execute(
            delete(self.model).where(self.model.id == id)
        )
        return result.rowcount
