"""
Note Repository.

Data access layer for notes. Handles all database operations
for the Note model.
"""

from sqlalchemy import delete

from notebook.models.note import Note
from notebook.repositories.base import BaseRepository


class NoteRepository(BaseRepository[Note]):
    """
    Repository for Note model.

    Inherits the tree row operations from BaseRepository
    and adds note-specific writes.
    """

    model = Note

    def set_body(self, id: str, body: str) -> int:
        """
        Replace the body of a note.

        Args:
            id: Note ID
            body: New body text

        Returns:
            Number of rows updated (0 or 1)
        """
        return self.update_by_id(id, body=body)

    def set_parent(self, id: str, parent_id: str) -> int:
        """
        Move a note under another folder. Title and ID are kept.

        Returns:
            Number of rows updated (0 or 1)
        """
        return self.update_by_id(id, parent_id=parent_id)

    def delete_children(self, parent_id: str) -> int:
        """
        Delete every note directly under parent_id.

        Returns:
            Number of rows deleted
        """
        result = self.session.execute(
            delete(Note).where(Note.parent_id == parent_id)
        )
        return result.rowcount
