"""
Note Service.

Business logic for notes: creation, reading, body updates, deletion,
move and copy. Notes are addressed as "/book/.../title".
"""

from sqlalchemy.orm import Session

from notebook.core.exceptions import (
    BookLessNoteError,
    NamelessNoteError,
    NotFoundError,
    OverwriteNotAllowedError,
)
from notebook.core.paths import join_path, split_path
from notebook.models.note import Note
from notebook.repositories.note import NoteRepository
from notebook.services.base import BaseService
from notebook.services.resolver import PathResolver


class NoteService(BaseService):
    """
    Service for note operations.

    Each operation resolves the note's folder through PathResolver and
    runs as a single transaction.
    """

    def __init__(self, session: Session) -> None:
        super().__init__(session)
        self.resolver = PathResolver(session)
        self.repo = NoteRepository(session)

    def make(self, path: str, create_parents: bool = False) -> Note:
        """
        Create an empty note at path.

        Making a note that already exists returns it unchanged.

        Args:
            path: Note path, e.g. "/journal/monday"
            create_parents: Create missing folders instead of failing

        Returns:
            The note at path

        Raises:
            BookLessNoteError: If path has no folder segment or the folder is missing
        """
        self._log_operation("Making note", path=path, create_parents=create_parents)

        with self._transaction("make_note"):
            try:
                parent_id, title = self.resolver.resolve_note_address(path, create_parents)
            except BookLessNoteError:
                raise
            except NotFoundError as e:
                raise BookLessNoteError(path) from e
            note = self._create(parent_id, title, path)

        self._log_debug("Note ready", note_id=note.id)
        return note

    def cat(self, path: str) -> str:
        """
        Read the body of a note.

        Raises:
            NotFoundError: If the folder or the note does not exist
        """
        with self._transaction("cat_note"):
            note = self._get(path)
        return note.body

    def update(self, path: str, body: str) -> int:
        """
        Replace the body of a note.

        Returns:
            Number of rows updated

        Raises:
            NotFoundError: If the folder or the note does not exist
        """
        self._log_operation("Updating note", path=path, length=len(body))

        with self._transaction("update_note"):
            note = self._get(path)
            return self.repo.set_body(note.id, body)

    def delete(self, path: str) -> int:
        """
        Delete a note.

        Returns:
            Number of rows deleted

        Raises:
            NotFoundError: If the folder or the note does not exist
        """
        self._log_operation("Deleting note", path=path)

        with self._transaction("delete_note"):
            note = self._get(path)
            return self.repo.delete_by_id(note.id)

    def move(
        self,
        src: str,
        dest: str,
        overwrite: bool = False,
        create_parents: bool = False,
    ) -> int:
        """
        Move a note into the folder dest, keeping its title and ID.

        When dest already holds a note with that title and overwrite is set,
        the destination takes the source's body and the source is deleted.

        Args:
            src: Path of the note to move
            dest: Path of the destination folder
            overwrite: Replace an existing note at the destination
            create_parents: Create the destination folder if missing

        Returns:
            Rows affected: 1 for a plain move, 2 for an overwrite

        Raises:
            NotFoundError: If src or the destination folder does not resolve
            BookLessNoteError: If dest is the root
            OverwriteNotAllowedError: If the destination is taken and overwrite is False
        """
        self._log_operation("Moving note", src=src, dest=dest, overwrite=overwrite)

        with self._transaction("move_note"):
            note = self._get(src)
            target = join_path(split_path(dest) + [note.title])
            parent_id, existing = self._destination(target, create_parents)

            if existing is not None:
                if not overwrite:
                    raise OverwriteNotAllowedError(target)
                if existing.id == note.id:
                    return 0
                rows = self.repo.set_body(existing.id, note.body)
                rows += self.repo.delete_by_id(note.id)
            else:
                rows = self.repo.set_parent(note.id, parent_id)

        self._log_debug("Note moved", note_id=note.id, target=target, rows=rows)
        return rows

    def copy(
        self,
        src: str,
        dest: str,
        overwrite: bool = False,
        create_parents: bool = False,
    ) -> int:
        """
        Copy a note into the folder dest. The source is never removed.

        Args:
            src: Path of the note to copy
            dest: Path of the destination folder
            overwrite: Replace the body of an existing note at the destination
            create_parents: Create the destination folder if missing

        Returns:
            Rows affected by writing the destination body

        Raises:
            NotFoundError: If src or the destination folder does not resolve
            BookLessNoteError: If dest is the root
            OverwriteNotAllowedError: If the destination is taken and overwrite is False
        """
        self._log_operation("Copying note", src=src, dest=dest, overwrite=overwrite)

        with self._transaction("copy_note"):
            note = self._get(src)
            target = join_path(split_path(dest) + [note.title])
            parent_id, existing = self._destination(target, create_parents)

            if existing is not None and not overwrite:
                raise OverwriteNotAllowedError(target)
            if existing is None:
                existing = self._create(parent_id, note.title, target)
            rows = self.repo.set_body(existing.id, note.body)

        self._log_debug("Note copied", note_id=note.id, copy_id=existing.id, target=target)
        return rows

    def _create(self, parent_id: str, title: str, path: str) -> Note:
        if not title:
            raise NamelessNoteError(path)
        return self.repo.insert_if_absent(parent_id=parent_id, title=title, body="")

    def _get(self, path: str) -> Note:
        parent_id, title = self.resolver.resolve_note_address(path)
        note = self.repo.find_child(parent_id, title)
        if note is None:
            raise NotFoundError(f"Note not found: {path}", path=path)
        return note

    def _destination(self, target: str, create_parents: bool) -> tuple[str, Note | None]:
        parent_id, title = self.resolver.resolve_note_address(target, create_parents)
        return parent_id, self.repo.find_child(parent_id, title)
