"""
NoteVault Backend — Note SQLAlchemy Models
============================================

What:  ORM models for the `notes` and `private_notes` tables.
Why:   Maps Python objects to database rows for type-safe database operations.
How:   Inherits from SQLAlchemy's DeclarativeBase; Alembic reads these for migrations.
Who:   Used by NoteService / VaultNoteService and by Alembic.

Table Design:
    - UUID primary key assigned by the application at insert time
    - title is optional, content is required (may be the empty string)
    - created_at is stamped at creation and defines "insertion order";
      public notes keep it internal, private notes expose it as createdAt
    - Rows are never updated, only inserted and deleted by id
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Note(Base):
    """
    A public note.

    Lifecycle:
        1. Created by POST /api/notes
        2. Listed by GET /api/notes in insertion order
        3. Deleted by DELETE /api/notes/{id}; never updated
    """

    __tablename__ = "notes"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier assigned at insert",
    )

    title: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        default=None,
        comment="Optional note title",
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        comment="Note body",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this note was created (UTC); defines listing order",
    )

    __table_args__ = (
        Index("idx_notes_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, created_at='{self.created_at}')>"


class PrivateNote(Base):
    """
    A note stored in the vault.

    Same lifecycle as Note; `created_at` is part of the API representation
    so the client can show when each entry was logged.
    """

    __tablename__ = "private_notes"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    title: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    content: Mapped[str] = mapped_column(Text, nullable=False, default="")

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this vault note was created (UTC)",
    )

    __table_args__ = (
        Index("idx_private_notes_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<PrivateNote(id={self.id}, created_at='{self.created_at}')>"
