"""
NoteVault Backend — Vault Config Service Tests
================================================

What:  Tests for setup / status / verify / security question / reset.
How:   Setup and its upsert run against SQLite; comparison rules are also
       checked against a mock session returning a VaultConfig instance.

What we test:
    ✅ Status false before setup, true after
    ✅ Exact passcode match
    ✅ Case-insensitive recovery answer, passcode replaced on success
    ✅ Wrong answer leaves the passcode unchanged
    ✅ Setup twice keeps exactly one row with the second values
    ✅ Security question lookup raises NotConfiguredError before setup
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from app.exceptions import NotConfiguredError, StoreUnavailableError
from app.models.vault import VAULT_CONFIG_ID, VaultConfig
from app.services.vault_config_service import (
    RESET_FAILED_MESSAGE,
    RESET_OK_MESSAGE,
    VaultConfigService,
)


class TestVaultSetupAndStatus:

    def setup_method(self):
        self.service = VaultConfigService()

    @pytest.mark.asyncio
    async def test_status_false_before_setup(self, db_session):
        assert await self.service.get_status(db_session) is False

    @pytest.mark.asyncio
    async def test_status_true_after_setup(self, db_session):
        await self.service.setup(db_session, "1234", "pet?", "Rex")

        assert await self.service.get_status(db_session) is True

    @pytest.mark.asyncio
    async def test_setup_replaces_previous_config(self, db_session):
        """Second setup overwrites every field; still a single row."""
        await self.service.setup(db_session, "1234", "pet?", "Rex")
        await self.service.setup(db_session, "9999", "city?", "Paris")

        count = (await db_session.execute(select(func.count()).select_from(VaultConfig))).scalar()
        assert count == 1
        assert await self.service.verify(db_session, "9999") is True
        assert await self.service.verify(db_session, "1234") is False
        assert await self.service.get_security_question(db_session) == "city?"

    @pytest.mark.asyncio
    async def test_setup_after_reset_overwrites_loaded_row(self, db_session):
        """Upsert result is visible even when the row is already in the session."""
        await self.service.setup(db_session, "1234", "pet?", "Rex")
        await self.service.reset_passcode(db_session, "rex", "5678")
        await self.service.setup(db_session, "abcd", "pet?", "Rex")

        assert await self.service.verify(db_session, "abcd") is True
        assert await self.service.verify(db_session, "5678") is False

    @pytest.mark.asyncio
    async def test_setup_uses_fixed_identity(self, db_session):
        await self.service.setup(db_session, "1234", "pet?", "Rex")

        config = await db_session.get(VaultConfig, VAULT_CONFIG_ID)
        assert config is not None
        assert config.security_answer == "Rex"

    @pytest.mark.asyncio
    async def test_setup_store_failure(self, mock_db_session):
        bind = MagicMock()
        bind.dialect.name = "sqlite"
        mock_db_session.get_bind = MagicMock(return_value=bind)
        mock_db_session.execute = AsyncMock(
            side_effect=OperationalError("INSERT", {}, Exception("locked"))
        )

        with pytest.raises(StoreUnavailableError, match="Setup Failed"):
            await self.service.setup(mock_db_session, "1", "q", "a")


class TestVaultVerify:

    def setup_method(self):
        self.service = VaultConfigService()

    @pytest.mark.asyncio
    async def test_verify_correct_and_wrong(self, db_session):
        await self.service.setup(db_session, "1234", "pet?", "Rex")

        assert await self.service.verify(db_session, "1234") is True
        assert await self.service.verify(db_session, "wrong") is False

    @pytest.mark.asyncio
    async def test_verify_is_exact_match(self, mock_db_session):
        mock_db_session.get = AsyncMock(
            return_value=VaultConfig(
                id=VAULT_CONFIG_ID, passcode="Secret", security_question="q", security_answer="a"
            )
        )

        assert await self.service.verify(mock_db_session, "secret") is False
        assert await self.service.verify(mock_db_session, "Secret ") is False
        assert await self.service.verify(mock_db_session, "Secret") is True

    @pytest.mark.asyncio
    async def test_verify_without_config_is_false(self, db_session):
        assert await self.service.verify(db_session, "") is False
        assert await self.service.verify(db_session, "1234") is False

    @pytest.mark.asyncio
    async def test_verify_store_failure(self, mock_db_session):
        mock_db_session.get = AsyncMock(side_effect=ConnectionRefusedError())

        with pytest.raises(StoreUnavailableError):
            await self.service.verify(mock_db_session, "1234")


class TestVaultRecovery:

    def setup_method(self):
        self.service = VaultConfigService()

    @pytest.mark.asyncio
    async def test_security_question_before_setup(self, db_session):
        with pytest.raises(NotConfiguredError, match="Vault not setup"):
            await self.service.get_security_question(db_session)

    @pytest.mark.asyncio
    async def test_security_question_after_setup(self, db_session):
        await self.service.setup(db_session, "1234", "pet?", "Rex")

        assert await self.service.get_security_question(db_session) == "pet?"

    @pytest.mark.asyncio
    async def test_reset_is_case_insensitive(self, db_session):
        await self.service.setup(db_session, "1234", "pet?", "Rex")

        result = await self.service.reset_passcode(db_session, "REX", "5678")

        assert result.success is True
        assert result.message == RESET_OK_MESSAGE
        assert await self.service.verify(db_session, "5678") is True
        assert await self.service.verify(db_session, "1234") is False

    @pytest.mark.asyncio
    async def test_reset_wrong_answer_keeps_passcode(self, db_session):
        await self.service.setup(db_session, "1234", "pet?", "Rex")

        result = await self.service.reset_passcode(db_session, "Max", "5678")

        assert result.success is False
        assert result.message == RESET_FAILED_MESSAGE
        assert await self.service.verify(db_session, "1234") is True
        assert await self.service.verify(db_session, "5678") is False

    @pytest.mark.asyncio
    async def test_reset_without_config_reports_failure(self, db_session):
        result = await self.service.reset_passcode(db_session, "anything", "5678")

        assert result.success is False
        assert await self.service.get_status(db_session) is False
