"""
Folder Model.

A node of the tree. Folders are also called books.
"""

from sqlalchemy import CheckConstraint, UniqueConstraint

from notebook.models.base import Base, TimestampMixin, TreeNodeMixin, UUIDMixin


class Folder(UUIDMixin, TreeNodeMixin, TimestampMixin, Base):
    """
    Folder database model.

    parent_id is the id of the owning folder, or ROOT_ID for top-level
    folders. Titles are unique among siblings.
    """

    __tablename__ = "folders"
    __table_args__ = (
        UniqueConstraint("parent_id", "title", name="uq_folders_parent_title"),
        CheckConstraint("id <> ''", name="ck_folders_id_not_root"),
        CheckConstraint("title <> ''", name="ck_folders_title_not_empty"),
    )

    def __repr__(self) -> str:
        return f"<Folder(id={self.id}, title={self.title!r}, parent_id={self.parent_id!r})>"
