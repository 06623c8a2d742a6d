"""Create notes, private_notes and vault_config tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Initial NoteVault schema.
       - notes:          public notes (title, content, created_at)
       - private_notes:  vault notes (title, content, created_at)
       - vault_config:   single row (id = 1) with passcode and recovery Q/A

Rollback: downgrade() drops all three tables (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _note_columns() -> list:
    """Columns shared by notes and private_notes. See app/models/note.py."""
    return [
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    ]


def upgrade() -> None:
    op.create_table("notes", *_note_columns())
    op.create_index("idx_notes_created_at", "notes", ["created_at"])

    op.create_table("private_notes", *_note_columns())
    op.create_index("idx_private_notes_created_at", "private_notes", ["created_at"])

    # One row at most: the CHECK pins the primary key to 1
    op.create_table(
        "vault_config",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("passcode", sa.Text(), nullable=False),
        sa.Column("security_question", sa.Text(), nullable=False),
        sa.Column("security_answer", sa.Text(), nullable=False),
        sa.CheckConstraint("id = 1", name="ck_vault_config_singleton"),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """WARNING: destroys all notes and the vault configuration."""
    op.drop_table("vault_config")
    op.drop_index("idx_private_notes_created_at", table_name="private_notes")
    op.drop_table("private_notes")
    op.drop_index("idx_notes_created_at", table_name="notes")
    op.drop_table("notes")
