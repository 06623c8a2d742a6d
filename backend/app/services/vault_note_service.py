"""
NoteVault Backend — Vault Note Service
========================================

What:  List / create / delete over the `private_notes` table.
How:   Same operations as NoteService, pointed at PrivateNote. The creation
       timestamp is stamped by the model default and returned as createdAt.
"""

from typing import Union

from app.models.note import Note, PrivateNote
from app.schemas.note import PrivateNoteResponse
from app.services.note_service import NoteService


class VaultNoteService(NoteService):
    """NoteService for vault notes; responses carry createdAt."""

    model = PrivateNote
    resource = "private note"

    def _to_response(self, row: Union[Note, PrivateNote]) -> PrivateNoteResponse:
        return PrivateNoteResponse(
            id=row.id,
            title=row.title,
            content=row.content,
            created_at=row.created_at,
        )


vault_note_service = VaultNoteService()
