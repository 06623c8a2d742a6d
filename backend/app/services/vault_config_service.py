"""
NoteVault Backend — Vault Config Service
==========================================

What:  Setup, status, passcode verification and passcode recovery for the
       single-user vault.
Why:   Keeps the vault rules (one config row, exact passcode match,
       case-insensitive recovery answer) out of the route handlers.
How:   Works on the one `vault_config` row identified by VAULT_CONFIG_ID.

Setup as upsert:
    setup() writes the row with INSERT ... ON CONFLICT (id) DO UPDATE on
    PostgreSQL and SQLite, so two concurrent setups both succeed and the last
    writer wins; the primary key keeps it to one row. Other dialects fall
    back to Session.merge().

Failure reporting:
    - No config on get_security_question() → NotConfiguredError (404)
    - Wrong passcode / wrong answer → False / ResetResponse(success=False),
      returned normally with HTTP 200
    - Store failures → StoreUnavailableError (500)

Passcode and answer are plaintext and are never written to the log.
"""

import logging
from typing import Optional

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import NotConfiguredError, StoreUnavailableError
from app.models.vault import VAULT_CONFIG_ID, VaultConfig
from app.schemas.vault import ResetResponse
from app.services.note_service import STORE_ERRORS

logger = logging.getLogger(__name__)

# Dialects with INSERT ... ON CONFLICT support
_UPSERT_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}

RESET_OK_MESSAGE = "Passcode Reset Successful"
RESET_FAILED_MESSAGE = "Security Answer Incorrect"


class VaultConfigService:
    """
    Business logic for the vault configuration record.

    Responsibilities:
        - get_status():            does a config exist?
        - setup():                 create or replace the config
        - verify():                exact passcode comparison
        - get_security_question(): recovery question lookup
        - reset_passcode():        answer check + passcode overwrite
    """

    async def get_status(self, db: AsyncSession) -> bool:
        """Whether the vault has been set up."""
        return await self._load(db) is not None

    async def setup(
        self,
        db: AsyncSession,
        passcode: str,
        security_question: str,
        security_answer: str,
    ) -> None:
        """
        Create the vault configuration, replacing any previous one wholesale.

        Raises:
            StoreUnavailableError: Upsert failed (→ 500)
        """
        values = {
            "id": VAULT_CONFIG_ID,
            "passcode": passcode,
            "security_question": security_question,
            "security_answer": security_answer,
        }
        try:
            dialect = db.get_bind().dialect.name
            insert = _UPSERT_INSERTS.get(dialect)
            if insert is None:
                await db.merge(VaultConfig(**values))
                await db.flush()
            else:
                stmt = insert(VaultConfig).values(**values)
                stmt = stmt.on_conflict_do_update(
                    index_elements=[VaultConfig.id],
                    set_={
                        "passcode": stmt.excluded.passcode,
                        "security_question": stmt.excluded.security_question,
                        "security_answer": stmt.excluded.security_answer,
                    },
                )
                await db.execute(stmt)
        except STORE_ERRORS as e:
            logger.error("Database error during vault setup: %s", str(e), exc_info=True)
            raise StoreUnavailableError(
                message="Setup Failed",
                context={"error_type": type(e).__name__},
            )

        logger.info("Vault configured")

    async def verify(self, db: AsyncSession, passcode: str) -> bool:
        """
        True iff a config exists and its passcode equals `passcode` exactly.
        """
        config = await self._load(db)
        matched = config is not None and config.passcode == passcode
        if not matched:
            logger.info("Vault passcode verification failed")
        return matched

    async def get_security_question(self, db: AsyncSession) -> str:
        """
        Return the stored recovery question.

        Raises:
            NotConfiguredError: Vault has not been set up (→ 404)
        """
        config = await self._load(db)
        if config is None:
            raise NotConfiguredError()
        return config.security_question

    async def reset_passcode(
        self,
        db: AsyncSession,
        answer: str,
        new_passcode: str,
    ) -> ResetResponse:
        """
        Replace the passcode if `answer` matches the stored answer,
        ignoring case.

        A mismatch or a missing config is reported in the returned
        ResetResponse, not raised. The passcode is unchanged on failure.
        """
        config = await self._load(db)
        if config is None or config.security_answer.lower() != answer.lower():
            logger.info("Vault passcode reset rejected")
            return ResetResponse(success=False, message=RESET_FAILED_MESSAGE)

        config.passcode = new_passcode
        try:
            await db.flush()
        except STORE_ERRORS as e:
            logger.error("Database error resetting vault passcode: %s", str(e), exc_info=True)
            raise StoreUnavailableError(context={"error_type": type(e).__name__})

        logger.info("Vault passcode reset")
        return ResetResponse(success=True, message=RESET_OK_MESSAGE)

    async def _load(self, db: AsyncSession) -> Optional[VaultConfig]:
        """
        Fetch the config row, or None.

        populate_existing refreshes an instance already in the session's
        identity map, which an upsert statement does not touch.
        """
        try:
            return await db.get(VaultConfig, VAULT_CONFIG_ID, populate_existing=True)
        except STORE_ERRORS as e:
            logger.error("Database error loading vault config: %s", str(e), exc_info=True)
            raise StoreUnavailableError(context={"error_type": type(e).__name__})


vault_config_service = VaultConfigService()
