"""create folder and note tables

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "folders",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("parent_id", sa.String(length=36), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("parent_id", "title", name="uq_folders_parent_title"),
        sa.CheckConstraint("id <> ''", name="ck_folders_id_not_root"),
        sa.CheckConstraint("title <> ''", name="ck_folders_title_not_empty"),
    )
    op.create_index("ix_folders_parent_id", "folders", ["parent_id"])

    op.create_table(
        "notes",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("parent_id", sa.String(length=36), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("parent_id", "title", name="uq_notes_parent_title"),
        sa.CheckConstraint("id <> ''", name="ck_notes_id_not_root"),
        sa.CheckConstraint("parent_id <> ''", name="ck_notes_parent_not_root"),
        sa.CheckConstraint("title <> ''", name="ck_notes_title_not_empty"),
    )
    op.create_index("ix_notes_parent_id", "notes", ["parent_id"])


def downgrade() -> None:
    op.drop_index("ix_notes_parent_id", table_name="notes")
    op.drop_table("notes")
    op.drop_index("ix_folders_parent_id", table_name="folders")
    op.drop_table("folders")
