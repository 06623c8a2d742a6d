"""
NoteVault Backend — Note Service Tests
========================================

What:  Tests for NoteService and VaultNoteService (list, create, delete).
How:   Mock sessions for error translation, a SQLite session for behavior
       that depends on real statements (ordering, idempotent delete).

What we test:
    ✅ Create then list round-trips content verbatim
    ✅ List is in insertion order
    ✅ Deleting an unknown or non-UUID id succeeds
    ✅ Empty content is accepted by the service
    ✅ Vault notes carry created_at
    ✅ Store failures become StoreUnavailableError
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

from sqlalchemy.exc import OperationalError

from app.exceptions import StoreUnavailableError
from app.schemas.note import PrivateNoteResponse
from app.services.note_service import NoteService
from app.services.vault_note_service import VaultNoteService


def _operational_error() -> OperationalError:
    return OperationalError("SELECT 1", {}, Exception("database is down"))


class TestNoteServiceStore:
    """NoteService against a real SQLite database."""

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_create_then_list_round_trip(self, db_session):
        """Created note appears in the list with content unchanged."""
        content = "line one\n  line two\twith tab - and ünïcödé"
        created = await self.service.create_note(db_session, title="T", content=content)

        notes = await self.service.list_notes(db_session)

        assert [n.id for n in notes] == [created.id]
        assert notes[0].content == content
        assert notes[0].title == "T"

    @pytest.mark.asyncio
    async def test_title_is_optional(self, db_session):
        created = await self.service.create_note(db_session, content="untitled")

        assert created.title is None
        assert created.id is not None

    @pytest.mark.asyncio
    async def test_empty_content_is_stored(self, db_session):
        """The service leaves blank-content validation to the client."""
        created = await self.service.create_note(db_session, content="")

        notes = await self.service.list_notes(db_session)
        assert notes[0].id == created.id
        assert notes[0].content == ""

    @pytest.mark.asyncio
    async def test_list_is_in_insertion_order(self, db_session):
        first = await self.service.create_note(db_session, content="first")
        second = await self.service.create_note(db_session, content="second")
        third = await self.service.create_note(db_session, content="third")

        notes = await self.service.list_notes(db_session)

        assert [n.id for n in notes] == [first.id, second.id, third.id]

    @pytest.mark.asyncio
    async def test_delete_existing_note(self, db_session):
        keep = await self.service.create_note(db_session, content="keep")
        drop = await self.service.create_note(db_session, content="drop")

        removed = await self.service.delete_note(db_session, str(drop.id))

        assert removed is True
        assert [n.id for n in await self.service.list_notes(db_session)] == [keep.id]

    @pytest.mark.asyncio
    async def test_delete_unknown_id_succeeds(self, db_session):
        """Idempotent delete: no error for an id that never existed."""
        removed = await self.service.delete_note(db_session, str(uuid4()))

        assert removed is False

    @pytest.mark.asyncio
    async def test_delete_non_uuid_id_succeeds(self, db_session):
        """An id the store could never have issued is simply unknown."""
        keep = await self.service.create_note(db_session, content="keep")

        removed = await self.service.delete_note(db_session, "64f1a2b3c4d5e6f708192a3b")

        assert removed is False
        assert [n.id for n in await self.service.list_notes(db_session)] == [keep.id]

    @pytest.mark.asyncio
    async def test_delete_non_uuid_id_skips_query(self, mock_db_session):
        removed = await self.service.delete_note(mock_db_session, "does-not-exist")

        assert removed is False
        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_public_and_vault_collections_are_separate(self, db_session):
        await self.service.create_note(db_session, content="public")
        await VaultNoteService().create_note(db_session, content="secret")

        public = await self.service.list_notes(db_session)
        private = await VaultNoteService().list_notes(db_session)

        assert [n.content for n in public] == ["public"]
        assert [n.content for n in private] == ["secret"]


class TestVaultNoteService:
    """VaultNoteService differences from NoteService."""

    def setup_method(self):
        self.service = VaultNoteService()

    @pytest.mark.asyncio
    async def test_created_note_has_timestamp(self, db_session):
        created = await self.service.create_note(db_session, title="pin", content="0000")

        assert isinstance(created, PrivateNoteResponse)
        assert created.created_at is not None

    @pytest.mark.asyncio
    async def test_list_returns_private_notes(self, db_session):
        await self.service.create_note(db_session, title="a", content="1")
        await self.service.create_note(db_session, title="b", content="2")

        notes = await self.service.list_notes(db_session)

        assert [n.title for n in notes] == ["a", "b"]
        assert all(isinstance(n, PrivateNoteResponse) for n in notes)

    def test_serializes_created_at_as_camel_case(self):
        from datetime import datetime, timezone

        note = PrivateNoteResponse(
            id=uuid4(), title=None, content="x", created_at=datetime.now(timezone.utc)
        )
        dumped = note.model_dump(by_alias=True)

        assert "createdAt" in dumped
        assert "created_at" not in dumped


class TestNoteServiceErrors:
    """Store failures are translated into StoreUnavailableError."""

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_list_store_failure(self, mock_db_session):
        mock_db_session.execute = AsyncMock(side_effect=_operational_error())

        with pytest.raises(StoreUnavailableError, match="Error fetching notes"):
            await self.service.list_notes(mock_db_session)

    @pytest.mark.asyncio
    async def test_create_store_failure(self, mock_db_session):
        mock_db_session.flush = AsyncMock(side_effect=_operational_error())

        with pytest.raises(StoreUnavailableError, match="Error saving note"):
            await self.service.create_note(mock_db_session, content="x")

    @pytest.mark.asyncio
    async def test_delete_store_failure(self, mock_db_session):
        mock_db_session.execute = AsyncMock(side_effect=ConnectionRefusedError())

        with pytest.raises(StoreUnavailableError):
            await self.service.delete_note(mock_db_session, str(uuid4()))

    @pytest.mark.asyncio
    async def test_list_maps_rows_to_responses(self, mock_db_session):
        row = MagicMock()
        row.id = uuid4()
        row.title = None
        row.content = "from mock"

        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = [row]
        mock_db_session.execute.return_value = mock_result

        notes = await self.service.list_notes(mock_db_session)

        assert len(notes) == 1
        assert notes[0].id == row.id
        assert notes[0].content == "from mock"
