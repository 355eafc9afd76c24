"""
Note Model.

Leaf content item of the tree.
"""

from sqlalchemy import CheckConstraint, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from notebook.models.base import Base, TimestampMixin, TreeNodeMixin, UUIDMixin


class Note(UUIDMixin, TreeNodeMixin, TimestampMixin, Base):
    """
    Note database model.

    A note always lives inside a folder, never directly at the root.
    Titles are unique among notes of the same folder; a folder and a note
    may share a title.
    """

    __tablename__ = "notes"
    __table_args__ = (
        UniqueConstraint("parent_id", "title", name="uq_notes_parent_title"),
        CheckConstraint("id <> ''", name="ck_notes_id_not_root"),
        CheckConstraint("parent_id <> ''", name="ck_notes_parent_not_root"),
        CheckConstraint("title <> ''", name="ck_notes_title_not_empty"),
    )

    body: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r}, parent_id={self.parent_id!r})>"
