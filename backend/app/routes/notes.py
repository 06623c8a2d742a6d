"""
NoteVault Backend — Notes Route Handlers
==========================================

What:  GET / POST /api/notes and DELETE /api/notes/{id}.
How:   Decodes the request, delegates to NoteService, returns JSON.
Who:   Called by the public-mode view of the frontend.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.note import (
    ErrorResponse,
    MessageResponse,
    NoteCreate,
    NoteResponse,
)
from app.services.note_service import note_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Notes"])


@router.get(
    "/notes",
    response_model=List[NoteResponse],
    responses={
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List all notes",
    description=(
        "Returns every public note in insertion order (oldest first). "
        "The client reverses the list to show the newest note first."
    ),
)
async def list_notes(
    db: AsyncSession = Depends(get_db_session),
) -> List[NoteResponse]:
    return await note_service.list_notes(db=db)


@router.post(
    "/notes",
    status_code=201,
    response_model=NoteResponse,
    responses={
        201: {"description": "Note created", "model": NoteResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a note",
)
async def create_note(
    payload: NoteCreate,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    """
    Store a new note and return it with its id.

    Only the presence of `content` is checked; an empty string is accepted.
    """
    return await note_service.create_note(
        db=db,
        title=payload.title,
        content=payload.content,
    )


@router.delete(
    "/notes/{note_id}",
    response_model=MessageResponse,
    responses={
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a note by ID",
)
async def delete_note(
    note_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    """Delete a note. Succeeds whether or not the id existed."""
    await note_service.delete_note(db=db, note_id=note_id)
    return MessageResponse(message="Note deleted successfully")
