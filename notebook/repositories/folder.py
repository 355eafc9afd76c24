"""
Folder Repository.

Data access layer for folders.
"""

from sqlalchemy import select

from notebook.models.folder import Folder
from notebook.repositories.base import BaseRepository


class FolderRepository(BaseRepository[Folder]):
    """Repository for Folder model."""

    model = Folder

    def child_ids(self, parent_id: str) -> list[str]:
        """Get the ids of folders directly under parent_id."""
        result = self.session.execute(
            select(Folder.id).where(Folder.parent_id == parent_id)
        )
        return list(result.scalars().all())
