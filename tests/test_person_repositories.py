"""Tests for the person_* link repositories."""
import uuid
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import select

from crmdb import get_db
from crmdb.models import Address, EmailAddress, Note, Person, PersonAddress
from crmdb.repositories import person_address as person_address_repo
from crmdb.repositories import person_email_address as person_email_repo
from crmdb.repositories import person_note as person_note_repo
from crmdb.repositories import person_phone as person_phone_repo
from crmdb.repositories import person_sales_order as person_sales_order_repo
from crmdb.repositories.base import DEFAULT_AUDIT_USER, NIL_UUID


async def _primary_flags(*email_ids):
    async with get_db() as session:
        result = await session.execute(
            select(EmailAddress.id, EmailAddress.is_primary).where(EmailAddress.id.in_(email_ids))
        )
        return dict(result.all())


@pytest.mark.asyncio
async def test_set_primary_email_address_is_exclusive(db, seed):
    created = datetime.now(timezone.utc) - timedelta(days=10)
    person = Person(id=uuid.uuid4(), first_name="Dana")
    work = EmailAddress(id=uuid.uuid4(), address="dana@work.test", is_primary=True, created_date=created)
    home = EmailAddress(
        id=uuid.uuid4(), address="dana@home.test", created_date=created + timedelta(days=1)
    )
    await seed(person, work, home)
    await person_email_repo.add_relationship(person.id, work.id)
    await person_email_repo.add_relationship(person.id, home.id)
    assert (await person_email_repo.get_primary_email_address_for_person(person.id)).second_id == work.id

    link = await person_email_repo.set_primary_email_address(person.id, home.id)

    assert link is not None and link.second_id == home.id
    assert await _primary_flags(work.id, home.id) == {work.id: False, home.id: True}
    assert (await person_email_repo.get_primary_email_address_for_person(person.id)).second_id == home.id


@pytest.mark.asyncio
async def test_set_primary_email_address_without_link_writes_nothing(db, seed):
    person = Person(id=uuid.uuid4())
    linked = EmailAddress(id=uuid.uuid4(), is_primary=True)
    stranger = EmailAddress(id=uuid.uuid4())
    await seed(person, linked, stranger)
    await person_email_repo.add_relationship(person.id, linked.id)

    assert await person_email_repo.set_primary_email_address(person.id, stranger.id) is None
    assert await _primary_flags(linked.id, stranger.id) == {linked.id: True, stranger.id: False}


@pytest.mark.asyncio
async def test_primary_email_falls_back_to_oldest(db, seed):
    created = datetime.now(timezone.utc) - timedelta(days=3)
    person = Person(id=uuid.uuid4())
    older = EmailAddress(id=uuid.uuid4(), created_date=created)
    newer = EmailAddress(id=uuid.uuid4(), created_date=created + timedelta(hours=1))
    await seed(person, older, newer)
    await person_email_repo.add_relationship(person.id, newer.id)
    await person_email_repo.add_relationship(person.id, older.id)

    primary = await person_email_repo.get_primary_email_address_for_person(person.id)

    assert primary.second_id == older.id
    assert await person_email_repo.get_primary_email_address_for_person(uuid.uuid4()) is None


@pytest.mark.asyncio
async def test_email_ids_validated():
    with pytest.raises(ValueError, match="person_id"):
        await person_email_repo.set_primary_email_address(NIL_UUID, uuid.uuid4())
    with pytest.raises(ValueError, match="email_address_type_id"):
        await person_email_repo.get_by_email_address_type(uuid.uuid4(), NIL_UUID)


@pytest.mark.asyncio
async def test_person_address_is_audited(db, seed, monkeypatch):
    monkeypatch.delenv("CRM_AUDIT_USER", raising=False)
    person = Person(id=uuid.uuid4())
    home = Address(id=uuid.uuid4(), address_type_id=uuid.uuid4())
    await seed(person, home)
    await person_address_repo.add_relationship(person.id, home.id)
    await person_address_repo.set_primary_address(person.id, home.id)

    async with get_db() as session:
        result = await session.execute(
            select(PersonAddress.modified_by).where(PersonAddress.person_id == person.id)
        )
    assert result.scalar_one() == DEFAULT_AUDIT_USER
    rows = await person_address_repo.get_by_address_type(person.id, home.address_type_id)
    assert [r.second_id for r in rows] == [home.id]


@pytest.mark.asyncio
async def test_person_note_type_and_phone_primary(db, seed):
    task_type = uuid.uuid4()
    person = Person(id=uuid.uuid4())
    note = Note(id=uuid.uuid4(), note_type_id=task_type)
    await seed(person, note)
    await person_note_repo.add_relationship(person.id, note.id)

    assert [r.second_id for r in await person_note_repo.get_by_note_type(person.id, task_type)] == [note.id]
    assert await person_note_repo.get_by_note_type(person.id, uuid.uuid4()) == []

    phone_id = uuid.uuid4()
    await person_phone_repo.add_relationship(person.id, phone_id)
    assert (await person_phone_repo.get_primary_phone(person.id)).second_id == phone_id
    assert await person_phone_repo.set_primary_phone(person.id, uuid.uuid4()) is None


@pytest.mark.asyncio
async def test_person_sales_order_upsert(db):
    person_id, order_id = uuid.uuid4(), uuid.uuid4()
    first = await person_sales_order_repo.add_relationship(person_id, order_id)
    second = await person_sales_order_repo.add_relationship(person_id, order_id)

    assert second.modified_date > first.modified_date
    assert len(await person_sales_order_repo.get_by_person_id(person_id)) == 1
    assert await person_sales_order_repo.remove_all_for_sales_order(order_id) == 1
