"""
Folder Service.

Creation, listing and deletion of folders (books). Deletes run in one
transaction: a failure anywhere leaves the tree as it was.
"""

from sqlalchemy.orm import Session

from notebook.core.exceptions import NamelessFolderError, NonEmptyBookError
from notebook.core.paths import split_leaf, split_path
from notebook.models.folder import Folder
from notebook.models.note import Note
from notebook.repositories.folder import FolderRepository
from notebook.repositories.note import NoteRepository
from notebook.services.base import BaseService
from notebook.services.resolver import PathResolver, folder_id


class FolderService(BaseService):
    """
    Service for folder operations.

    Every operation re-resolves its path; nothing is cached between calls.
    """

    def __init__(self, session: Session) -> None:
        super().__init__(session)
        self.resolver = PathResolver(session)
        self.repo = FolderRepository(session)
        self.notes = NoteRepository(session)

    def make(self, path: str, create_parents: bool = False) -> Folder:
        """
        Create the folder at path.

        Making a folder that already exists returns the existing row.

        Args:
            path: Folder path, e.g. "/journal/2024"
            create_parents: Create missing ancestors instead of failing

        Returns:
            The folder at path

        Raises:
            NamelessFolderError: If path has no final segment
            NotFoundError: If an ancestor is missing and create_parents is False
        """
        parents, title = split_leaf(path)
        if not title:
            raise NamelessFolderError(path)

        self._log_operation("Making book", path=path, create_parents=create_parents)

        with self._transaction("make_folder"):
            parent = self.resolver.resolve_segments(parents, create_missing=create_parents)
            folder = self.resolver.create_folder(title, parent)

        self._log_debug("Book ready", folder_id=folder.id)
        return folder

    def list(self, path: str = "/") -> tuple[list[Folder], list[Note]]:
        """
        List the direct children of a folder.

        Args:
            path: Folder path; "/" lists the root

        Returns:
            Tuple of (child folders, child notes)

        Raises:
            NotFoundError: If path does not resolve
        """
        with self._transaction("list_folder"):
            folder = self.resolver.resolve_folder(path)
            parent_id = folder_id(folder)
            folders = self.repo.list_children(parent_id)
            notes = self.notes.list_children(parent_id)

        self._log_debug("Book listed", path=path, folders=len(folders), notes=len(notes))
        return folders, notes

    def delete(self, path: str, recursive: bool = False) -> int:
        """
        Delete the folder at path.

        Args:
            path: Folder path
            recursive: Also delete every folder and note below it

        Returns:
            Number of rows removed, folders and notes together

        Raises:
            NamelessFolderError: If path is the root
            NotFoundError: If path does not resolve
            NonEmptyBookError: If the folder has children and recursive is False
        """
        if not split_path(path):
            raise NamelessFolderError(path)

        self._log_operation("Deleting book", path=path, recursive=recursive)

        with self._transaction("delete_folder"):
            folder = self.resolver.resolve_folder(path)
            if recursive:
                rows = self._delete_subtree(folder.id)
            elif self.repo.has_children(folder.id) or self.notes.has_children(folder.id):
                raise NonEmptyBookError(path)
            else:
                rows = self.repo.delete_by_id(folder.id)

        self._log_operation("Book deleted", path=path, rows=rows)
        return rows

    def _delete_subtree(self, root_id: str) -> int:
        """Post-order delete: children first, then the folder itself."""
        rows = 0
        for child_id in self.repo.child_ids(root_id):
            rows += self._delete_subtree(child_id)
        rows += self.notes.delete_children(root_id)
        rows += self.repo.delete_by_id(root_id)
        return rows
