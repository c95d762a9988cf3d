"""Tests for the generic junction store and its logging wrapper."""
import asyncio
import logging
import uuid
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, OperationalError

from crmdb import get_db
from crmdb.models import CompanyAttachment, CompanyNote, CompanyPayment
from crmdb.repositories.base import DEFAULT_AUDIT_USER, JunctionStore, JunctionTable
from schemas.association import AssociationRow

NOTES = JunctionTable(CompanyNote, CompanyNote.company_id, CompanyNote.note_id)
PAYMENTS = JunctionTable(
    CompanyPayment, CompanyPayment.company_id, CompanyPayment.payment_id, upsert_on_add=True
)


def _broken_factory(error):
    """Session factory whose session fails every statement with error."""
    session = MagicMock()
    session.execute = AsyncMock(side_effect=error)

    @asynccontextmanager
    async def _factory():
        yield session

    return _factory


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


def test_table_properties():
    assert NOTES.name == "company_note"
    assert not NOTES.audited
    assert JunctionTable(
        CompanyAttachment, CompanyAttachment.company_id, CompanyAttachment.attachment_id
    ).audited
    assert [c.name for c in NOTES.columns] == ["first_id", "second_id", "active", "modified_date"]


def test_store_name_defaults_to_model():
    assert JunctionStore(NOTES).name == "CompanyNoteRepository"
    assert JunctionStore(NOTES, name="Notes").name == "Notes"


# ---------------------------------------------------------------------------
# CRUD against SQLite
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_add_then_get_round_trip(db):
    """A freshly added pair is readable by composite id and from both sides."""
    store = JunctionStore(NOTES)
    company_id, note_id = uuid.uuid4(), uuid.uuid4()
    row = AssociationRow(first_id=company_id, second_id=note_id)

    assert await store.add(row) == row

    found = await store.get_by_composite_id(company_id, note_id)
    assert found is not None
    assert (found.first_id, found.second_id, found.active) == (company_id, note_id, True)
    assert found.modified_date is not None
    assert [r.second_id for r in await store.get_by_first_id(company_id)] == [note_id]
    assert [r.first_id for r in await store.get_by_second_id(note_id)] == [company_id]
    assert await store.exists(company_id, note_id)


@pytest.mark.asyncio
async def test_delete_is_idempotent_and_soft(db):
    store = JunctionStore(NOTES)
    company_id, note_id = uuid.uuid4(), uuid.uuid4()
    await store.add_relationship(company_id, note_id)

    assert await store.delete(company_id, note_id) is True
    assert await store.delete(company_id, note_id) is False, "Second delete must find nothing live"
    assert await store.get_by_composite_id(company_id, note_id) is None
    assert await store.get_all() == []

    removed = await store.get_removed(first_id=company_id)
    assert len(removed) == 1, "Soft-deleted row must still be stored"
    assert removed[0].active is False


@pytest.mark.asyncio
async def test_composite_key_isolation(db):
    """Deleting (a, b) leaves (a, c) untouched."""
    store = JunctionStore(NOTES)
    company_id, note_b, note_c = uuid.uuid4(), uuid.uuid4(), uuid.uuid4()
    await store.add_relationship(company_id, note_b)
    await store.add_relationship(company_id, note_c)

    await store.delete(company_id, note_b)

    assert await store.get_by_composite_id(company_id, note_c) is not None
    assert [r.second_id for r in await store.get_by_first_id(company_id)] == [note_c]


@pytest.mark.asyncio
async def test_bulk_delete_scope(db):
    store = JunctionStore(NOTES)
    company_a, company_x = uuid.uuid4(), uuid.uuid4()
    note_1, note_2 = uuid.uuid4(), uuid.uuid4()
    await store.add_relationship(company_a, note_1)
    await store.add_relationship(company_a, note_2)
    await store.add_relationship(company_x, note_1)

    assert await store.remove_all_by_first_id(company_a) == 2
    assert await store.remove_all_by_first_id(company_a) == 0
    assert await store.get_by_first_id(company_a) == []
    assert await store.get_by_composite_id(company_x, note_1) is not None

    assert await store.delete_by_second_id(note_1) is True
    assert await store.delete_by_second_id(note_1) is False


@pytest.mark.asyncio
async def test_plain_add_of_existing_pair_fails(db, caplog):
    store = JunctionStore(NOTES)
    company_id, note_id = uuid.uuid4(), uuid.uuid4()
    await store.add_relationship(company_id, note_id)
    caplog.set_level(logging.DEBUG)

    with pytest.raises(IntegrityError):
        await store.add(AssociationRow(first_id=company_id, second_id=note_id))

    records = [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert [r.name for r in records] == ["crmdb.repositories.base"], "Failure is logged once, by the wrapper"
    assert records[0].operation == "add"
    assert records[0].repository == "CompanyNoteRepository"
    assert records[0].details["first_id"] == company_id


@pytest.mark.asyncio
async def test_upsert_reactivates_single_row(db):
    """Re-adding a removed pair gives one live row with a newer modified_date."""
    store = JunctionStore(PAYMENTS)
    company_id, payment_id = uuid.uuid4(), uuid.uuid4()
    first = await store.add(AssociationRow(first_id=company_id, second_id=payment_id))
    before = await store.get_by_composite_id(company_id, payment_id)
    await store.delete(company_id, payment_id)

    second = await store.add(AssociationRow(first_id=company_id, second_id=payment_id, active=False))

    assert second.active is True
    assert second.modified_date > first.modified_date
    rows = await store.get_by_first_id(company_id)
    assert len(rows) == 1
    assert rows[0].modified_date > before.modified_date
    assert await store.get_removed(first_id=company_id) == []


@pytest.mark.asyncio
async def test_upsert_twice_in_a_row_keeps_one_live_row(db):
    """A second add of a live pair updates it in place and advances modified_date."""
    store = JunctionStore(PAYMENTS)
    company_id, payment_id = uuid.uuid4(), uuid.uuid4()
    await store.add(AssociationRow(first_id=company_id, second_id=payment_id))
    before = await store.get_by_composite_id(company_id, payment_id)

    await store.add(AssociationRow(first_id=company_id, second_id=payment_id))

    rows = await store.get_by_first_id(company_id)
    assert len(rows) == 1, "Upsert must not create a second row"
    assert rows[0].active is True
    assert rows[0].modified_date > before.modified_date
    assert await store.get_removed(first_id=company_id) == []


@pytest.mark.asyncio
async def test_update_can_reactivate(db):
    store = JunctionStore(NOTES)
    company_id, note_id = uuid.uuid4(), uuid.uuid4()
    await store.add_relationship(company_id, note_id)
    await store.delete(company_id, note_id)

    row = AssociationRow(first_id=company_id, second_id=note_id, active=True)
    assert await store.update(row) == row
    assert await store.exists(company_id, note_id)


@pytest.mark.asyncio
async def test_touch_moves_latest(db):
    store = JunctionStore(NOTES)
    company_id, older, newer = uuid.uuid4(), uuid.uuid4(), uuid.uuid4()
    await store.add_relationship(company_id, older)
    await store.add_relationship(company_id, newer)
    assert (await store.get_latest_by_first_id(company_id)).second_id == newer

    touched = await store.touch(company_id, older)

    assert touched is not None and touched.second_id == older
    assert (await store.get_latest_by_first_id(company_id)).second_id == older
    assert await store.touch(company_id, uuid.uuid4()) is None
    assert await store.get_latest_by_second_id(uuid.uuid4()) is None


@pytest.mark.asyncio
async def test_audited_table_stamps_modified_by(db, monkeypatch):
    monkeypatch.delenv("CRM_AUDIT_USER", raising=False)
    store = JunctionStore(JunctionTable(
        CompanyAttachment, CompanyAttachment.company_id, CompanyAttachment.attachment_id
    ))
    company_id, attachment_id = uuid.uuid4(), uuid.uuid4()
    await store.add_relationship(company_id, attachment_id)
    await store.delete(company_id, attachment_id)

    async with get_db() as session:
        result = await session.execute(
            select(CompanyAttachment.modified_by).where(CompanyAttachment.company_id == company_id)
        )
    assert result.scalar_one() == DEFAULT_AUDIT_USER


@pytest.mark.asyncio
async def test_audit_user_read_at_write_time(db, monkeypatch):
    monkeypatch.setenv("CRM_AUDIT_USER", "import-bot")
    store = JunctionStore(JunctionTable(
        CompanyAttachment, CompanyAttachment.company_id, CompanyAttachment.attachment_id
    ))
    company_id, attachment_id = uuid.uuid4(), uuid.uuid4()
    await store.add_relationship(company_id, attachment_id)

    async with get_db() as session:
        result = await session.execute(
            select(CompanyAttachment.modified_by).where(CompanyAttachment.company_id == company_id)
        )
    assert result.scalar_one() == "import-bot"


# ---------------------------------------------------------------------------
# Validation and failure paths (no database)
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_none_row_rejected_before_io():
    factory = MagicMock()
    store = JunctionStore(NOTES, session_factory=factory)
    with pytest.raises(ValueError):
        await store.add(None)
    with pytest.raises(ValueError):
        await store.update(None)
    factory.assert_not_called()


@pytest.mark.asyncio
async def test_backend_error_logged_and_reraised(caplog):
    boom = OperationalError("SELECT 1", {}, Exception("connection refused"))
    store = JunctionStore(NOTES, session_factory=_broken_factory(boom))
    caplog.set_level(logging.DEBUG, logger="crmdb.repositories.base")
    company_id = uuid.uuid4()

    with pytest.raises(OperationalError) as excinfo:
        await store.get_by_first_id(company_id, operation="get_by_company_id")

    assert excinfo.value is boom, "Backend exception must propagate unchanged"
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert errors[0].operation == "get_by_company_id"
    assert errors[0].details == {"entity_type": "CompanyNote", "first_id": company_id}
    assert errors[0].exc_info is not None
    assert not any("Successfully" in r.getMessage() for r in caplog.records)


@pytest.mark.asyncio
async def test_cancellation_logged_and_reraised(caplog):
    store = JunctionStore(NOTES, session_factory=_broken_factory(asyncio.CancelledError()))
    caplog.set_level(logging.ERROR, logger="crmdb.repositories.base")

    with pytest.raises(asyncio.CancelledError):
        await store.get_all()

    assert [r.operation for r in caplog.records] == ["get_all"]
