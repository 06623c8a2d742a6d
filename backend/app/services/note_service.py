"""
NoteVault Backend — Note Service
==================================

What:  List / create / delete over the public `notes` table.
Why:   Keeps store access and error translation out of the route handlers.
How:   Each method runs one statement on the request's AsyncSession and
       converts SQLAlchemy / connection failures into StoreUnavailableError.
Who:   Called by the /api/notes route handlers. VaultNoteService reuses it
       for the private collection.

Design Decision:
    NoteService is stateless; it receives the db session for each call.
    The commit happens in get_db_session once the route returns, so a
    service call never spans more than one write and needs no rollback
    logic of its own.
"""

import logging
from typing import List, Optional, Type, Union
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import StoreUnavailableError
from app.models.note import Note, PrivateNote
from app.schemas.note import NoteResponse

logger = logging.getLogger(__name__)

# Failures that mean "the store could not do it"
STORE_ERRORS = (SQLAlchemyError, OSError)


class NoteService:
    """
    Business logic layer for a note collection.

    Responsibilities:
        - list_notes():  every note, oldest first
        - create_note(): insert and return the stored record
        - delete_note(): idempotent delete by id
    """

    model: Type[Union[Note, PrivateNote]] = Note
    resource = "note"

    async def list_notes(self, db: AsyncSession) -> List[NoteResponse]:
        """
        Return all notes in insertion order.

        The client reverses the list for most-recent-first display.

        Raises:
            StoreUnavailableError: Query execution failed (→ 500)
        """
        try:
            result = await db.execute(
                select(self.model).order_by(self.model.created_at, self.model.id)
            )
            rows = list(result.scalars().all())
        except STORE_ERRORS as e:
            logger.error("Database error listing %ss: %s", self.resource, str(e), exc_info=True)
            raise StoreUnavailableError(
                message=f"Error fetching {self.resource}s",
                context={"error_type": type(e).__name__},
            )

        return [self._to_response(row) for row in rows]

    async def create_note(
        self,
        db: AsyncSession,
        content: str,
        title: Optional[str] = None,
    ) -> NoteResponse:
        """
        Persist a new note and return it with its assigned id.

        Empty content is stored as-is; the service does not validate it.

        Raises:
            StoreUnavailableError: Insert failed (→ 500)
        """
        row = self.model(title=title, content=content)
        try:
            db.add(row)
            # Assigns defaults and surfaces constraint errors before we respond
            await db.flush()
        except STORE_ERRORS as e:
            logger.error("Database error saving %s: %s", self.resource, str(e), exc_info=True)
            raise StoreUnavailableError(
                message=f"Error saving {self.resource}",
                context={"error_type": type(e).__name__},
            )

        logger.info("Created %s %s", self.resource, row.id)
        return self._to_response(row)

    async def delete_note(self, db: AsyncSession, note_id: str) -> bool:
        """
        Delete a note by id.

        No existence check: deleting an unknown id succeeds, matching the
        store's idempotent delete. An id that is not a UUID cannot name a
        stored note, so it is treated as unknown without a query.

        Returns:
            True if a row was removed, False if the id did not exist.

        Raises:
            StoreUnavailableError: Delete failed (→ 500)
        """
        try:
            row_id = UUID(note_id)
        except ValueError:
            logger.debug("Delete of unknown %s %s ignored", self.resource, note_id)
            return False

        try:
            result = await db.execute(
                delete(self.model).where(self.model.id == row_id)
            )
        except STORE_ERRORS as e:
            logger.error("Database error deleting %s %s: %s", self.resource, note_id, str(e))
            raise StoreUnavailableError(
                message=f"Error deleting {self.resource}",
                context={"note_id": note_id},
            )

        removed = bool(result.rowcount)
        if removed:
            logger.info("Deleted %s %s", self.resource, note_id)
        else:
            logger.debug("Delete of unknown %s %s ignored", self.resource, note_id)
        return removed

    def _to_response(self, row: Union[Note, PrivateNote]) -> NoteResponse:
        return NoteResponse(id=row.id, title=row.title, content=row.content)


# ── Singleton Instance ────────────────────────────────────────────────────
note_service = NoteService()
