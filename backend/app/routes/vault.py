"""
NoteVault Backend — Vault Route Handlers
==========================================

What:  /api/vault/*: configuration (status, setup, verify, recovery) and
       CRUD over the private notes collection.
How:   One service call per route; wrong passcodes and wrong answers come
       back as success=false with HTTP 200.

Access to /api/vault/notes:
    By default these endpoints are open; the passcode only gates the UI.
    With VAULT_REQUIRE_PASSCODE=true they require an X-Vault-Passcode
    header equal to the stored passcode (401 otherwise).
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db_session
from app.exceptions import VaultLockedError
from app.schemas.note import (
    ErrorResponse,
    MessageResponse,
    NoteCreate,
    PrivateNoteResponse,
)
from app.schemas.vault import (
    ResetRequest,
    ResetResponse,
    SecurityQuestionResponse,
    VaultSetupRequest,
    VaultStatusResponse,
    VerifyRequest,
    VerifyResponse,
)
from app.services.vault_config_service import vault_config_service
from app.services.vault_note_service import vault_note_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/vault", tags=["Vault"])


async def require_vault_access(
    x_vault_passcode: Optional[str] = Header(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> None:
    """
    Passcode gate for the vault notes endpoints.

    No-op unless settings.vault_require_passcode is set.
    """
    if not settings.vault_require_passcode:
        return
    if x_vault_passcode is None or not await vault_config_service.verify(db, x_vault_passcode):
        raise VaultLockedError()


# ══════════════════════════════════════════════════════════════════════════
# Vault configuration
# ══════════════════════════════════════════════════════════════════════════

@router.get(
    "/status",
    response_model=VaultStatusResponse,
    summary="Check whether the vault has been set up",
)
async def vault_status(
    db: AsyncSession = Depends(get_db_session),
) -> VaultStatusResponse:
    return VaultStatusResponse(is_setup=await vault_config_service.get_status(db))


@router.post(
    "/setup",
    response_model=MessageResponse,
    responses={
        500: {"description": "Setup failed", "model": ErrorResponse},
    },
    summary="Configure the vault",
    description="Sets the passcode and recovery question, replacing any existing configuration.",
)
async def setup_vault(
    payload: VaultSetupRequest,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await vault_config_service.setup(
        db,
        passcode=payload.passcode,
        security_question=payload.security_question,
        security_answer=payload.security_answer,
    )
    return MessageResponse(message="Vault Securely Configured")


@router.post(
    "/verify",
    response_model=VerifyResponse,
    summary="Verify the vault passcode",
)
async def verify_passcode(
    payload: VerifyRequest,
    db: AsyncSession = Depends(get_db_session),
) -> VerifyResponse:
    return VerifyResponse(success=await vault_config_service.verify(db, payload.passcode))


@router.get(
    "/security-question",
    response_model=SecurityQuestionResponse,
    responses={
        404: {"description": "Vault not setup", "model": ErrorResponse},
    },
    summary="Get the recovery question",
)
async def security_question(
    db: AsyncSession = Depends(get_db_session),
) -> SecurityQuestionResponse:
    question = await vault_config_service.get_security_question(db)
    return SecurityQuestionResponse(question=question)


@router.post(
    "/reset",
    response_model=ResetResponse,
    summary="Reset the passcode with the security answer",
    description=(
        "Compares the answer case-insensitively. A wrong answer is reported as "
        "success=false with HTTP 200."
    ),
)
async def reset_passcode(
    payload: ResetRequest,
    db: AsyncSession = Depends(get_db_session),
) -> ResetResponse:
    return await vault_config_service.reset_passcode(
        db,
        answer=payload.answer,
        new_passcode=payload.new_passcode,
    )


# ══════════════════════════════════════════════════════════════════════════
# Vault notes
# ══════════════════════════════════════════════════════════════════════════

@router.get(
    "/notes",
    response_model=List[PrivateNoteResponse],
    dependencies=[Depends(require_vault_access)],
    responses={
        401: {"description": "Vault locked", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List vault notes",
)
async def list_private_notes(
    db: AsyncSession = Depends(get_db_session),
) -> List[PrivateNoteResponse]:
    return await vault_note_service.list_notes(db=db)


@router.post(
    "/notes",
    response_model=PrivateNoteResponse,
    dependencies=[Depends(require_vault_access)],
    responses={
        401: {"description": "Vault locked", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a vault note",
)
async def create_private_note(
    payload: NoteCreate,
    db: AsyncSession = Depends(get_db_session),
) -> PrivateNoteResponse:
    return await vault_note_service.create_note(
        db=db,
        title=payload.title,
        content=payload.content,
    )


@router.delete(
    "/notes/{note_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_vault_access)],
    responses={
        401: {"description": "Vault locked", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a vault note by ID",
)
async def delete_private_note(
    note_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await vault_note_service.delete_note(db=db, note_id=note_id)
    return MessageResponse(message="Deleted")
