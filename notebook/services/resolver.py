"""
Path Resolver.

Turns slash-delimited paths into folder identities. Every folder and note
operation resolves its path prefix through here.
"""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from notebook.core.exceptions import BookLessNoteError, NamelessFolderError, NotFoundError
from notebook.core.paths import join_path, split_leaf, split_path
from notebook.models.base import ROOT_ID
from notebook.models.folder import Folder
from notebook.repositories.folder import FolderRepository
from notebook.services.base import BaseService


def folder_id(folder: Folder | None) -> str:
    """Return the identity of a resolved folder, ROOT_ID for the root."""
    return folder.id if folder is not None else ROOT_ID


class PathResolver(BaseService):
    """
    Resolves paths against the folder tree.

    Lookup and auto-creation share one walk, parameterized by
    create_missing, so title and uniqueness rules live in one place.
    """

    def __init__(self, session: Session) -> None:
        super().__init__(session)
        self.folders = FolderRepository(session)

    def create_folder(self, title: str, parent: Folder | None) -> Folder:
        """
        Create a folder under parent, or return the one already there.

        Args:
            title: Folder title
            parent: Parent folder, None for the root

        Returns:
            The folder stored under (parent, title)

        Raises:
            NamelessFolderError: If title is empty; the error carries the
                parent folder id
        """
        if not title:
            raise NamelessFolderError(folder_id(parent))

        parent_id = folder_id(parent)
        folder = self.folders.insert_if_absent(parent_id=parent_id, title=title)
        self._log_debug("Folder ensured", folder_id=folder.id, parent_id=parent_id, title=title)
        return folder

    def resolve_segments(
        self,
        segments: Sequence[str],
        create_missing: bool = False,
    ) -> Folder | None:
        """
        Walk segments from the root.

        Args:
            segments: Folder titles from the root downwards
            create_missing: Create folders that do not exist yet

        Returns:
            The last folder, or None when segments is empty (the root)

        Raises:
            NotFoundError: If a segment is missing and create_missing is False
        """
        if create_missing and segments:
            with self._transaction("resolve_folder"):
                return self._walk(segments, create_missing)
        return self._walk(segments, create_missing)

    def resolve_folder(self, path: str, create_missing: bool = False) -> Folder | None:
        """
        Resolve a folder path.

        An empty path or "/" resolves to None, the root.

        Raises:
            NotFoundError: If the path does not resolve and create_missing is False
        """
        return self.resolve_segments(split_path(path), create_missing)

    def resolve_note_address(
        self,
        path: str,
        create_parents: bool = False,
    ) -> tuple[str, str]:
        """
        Resolve the folder a note path points into.

        Args:
            path: Note path, at least "/book/title"
            create_parents: Create missing folders on the way

        Returns:
            Tuple of (parent folder id, note title)

        Raises:
            BookLessNoteError: If the path has no folder segment
            NotFoundError: If the folder does not resolve
        """
        parents, title = split_leaf(path)
        if not parents:
            raise BookLessNoteError(path)

        parent = self.resolve_segments(parents, create_missing=create_parents)
        return folder_id(parent), title

    def _walk(self, segments: Sequence[str], create_missing: bool) -> Folder | None:
        folder: Folder | None = None
        for depth, title in enumerate(segments):
            found = self.folders.find_child(folder_id(folder), title)
            if found is None:
                if not create_missing:
                    missing = join_path(segments[: depth + 1])
                    self._log_debug("Path segment not found", path=missing)
                    raise NotFoundError(f"Book not found: {missing}", path=missing)
                found = self.create_folder(title, folder)
            folder = found
        return folder
