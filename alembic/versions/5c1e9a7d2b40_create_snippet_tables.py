"""create users, folders and code_snippets tables

Revision ID: 5c1e9a7d2b40
Revises:
Create Date: 2026-10-19 10:12:31.481207

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5c1e9a7d2b40"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        *_timestamps(),
        sqlite_autoincrement=True,
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"])
    # Unique index backs the one-account-per-email rule under concurrent signups
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "folders",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        *_timestamps(),
    )
    op.create_index(op.f("ix_folders_id"), "folders", ["id"])
    op.create_index(op.f("ix_folders_user_id"), "folders", ["user_id"])

    op.create_table(
        "code_snippets",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("code", sa.Text(), nullable=True),
        sa.Column("language", sa.String(length=50), nullable=False),
        sa.Column("screenshot_url", sa.String(length=500), nullable=True),
        sa.Column(
            "folder_id",
            sa.Integer(),
            sa.ForeignKey("folders.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        *_timestamps(),
    )
    op.create_index(op.f("ix_code_snippets_id"), "code_snippets", ["id"])
    op.create_index(op.f("ix_code_snippets_folder_id"), "code_snippets", ["folder_id"])
    op.create_index(op.f("ix_code_snippets_user_id"), "code_snippets", ["user_id"])


def downgrade() -> None:
    op.drop_table("code_snippets")
    op.drop_table("folders")
    op.drop_table("users")
