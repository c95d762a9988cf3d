"""Tests for the company_* link repositories."""
import uuid
from datetime import datetime, timedelta, timezone

import pytest

from crmdb.models import Address, Company, Note, Person, Phone, Quote, SalesOrder
from crmdb.repositories import company_activity as company_activity_repo
from crmdb.repositories import company_address as company_address_repo
from crmdb.repositories import company_email_address as company_email_repo
from crmdb.repositories import company_invoice as company_invoice_repo
from crmdb.repositories import company_note as company_note_repo
from crmdb.repositories import company_person as company_person_repo
from crmdb.repositories import company_phone as company_phone_repo
from crmdb.repositories import company_quote as company_quote_repo
from crmdb.repositories import company_sales_order as company_sales_order_repo
from crmdb.repositories.base import NIL_UUID


@pytest.mark.asyncio
async def test_company_note_lifecycle(db):
    """Add, read, remove twice, then the company has no live notes."""
    c1, n1 = uuid.uuid4(), uuid.uuid4()

    added = await company_note_repo.add_relationship(c1, n1)
    assert added.active is True

    found = await company_note_repo.get_by_company_and_note_id(c1, n1)
    assert found is not None and found.second_id == n1

    assert await company_note_repo.remove_relationship(c1, n1) is True
    assert await company_note_repo.remove_relationship(c1, n1) is False
    assert await company_note_repo.get_by_company_id(c1) == []


@pytest.mark.asyncio
async def test_exists_by_company_and_activity(db):
    c1, act1 = uuid.uuid4(), uuid.uuid4()
    assert await company_activity_repo.exists_by_company_and_activity(c1, act1) is False

    await company_activity_repo.add_relationship(c1, act1)
    assert await company_activity_repo.exists_by_company_and_activity(c1, act1) is True

    await company_activity_repo.store.delete(c1, act1)
    assert await company_activity_repo.exists_by_company_and_activity(c1, act1) is False


@pytest.mark.asyncio
async def test_remove_all_for_company_counts_rows(db):
    company_id = uuid.uuid4()
    for _ in range(3):
        await company_activity_repo.add_relationship(company_id, uuid.uuid4())

    assert await company_activity_repo.remove_all_for_company(company_id) == 3
    assert await company_activity_repo.delete_by_company_id(company_id) is False


@pytest.mark.asyncio
async def test_get_by_note_type_filters_on_note(db, seed):
    meeting_type, call_type = uuid.uuid4(), uuid.uuid4()
    company = Company(id=uuid.uuid4(), name="Acme")
    meeting = Note(id=uuid.uuid4(), note_type_id=meeting_type)
    call = Note(id=uuid.uuid4(), note_type_id=call_type)
    archived = Note(id=uuid.uuid4(), note_type_id=meeting_type, active=False)
    await seed(company, meeting, call, archived)
    for note in (meeting, call, archived):
        await company_note_repo.add_relationship(company.id, note.id)

    rows = await company_note_repo.get_by_note_type(company.id, meeting_type)

    assert [r.second_id for r in rows] == [meeting.id], "Only live notes of the requested type"


@pytest.mark.asyncio
async def test_get_by_phone_type_skips_removed_links(db, seed):
    mobile = uuid.uuid4()
    company = Company(id=uuid.uuid4())
    phone_a = Phone(id=uuid.uuid4(), phone_type_id=mobile)
    phone_b = Phone(id=uuid.uuid4(), phone_type_id=mobile)
    await seed(company, phone_a, phone_b)
    await company_phone_repo.add_relationship(company.id, phone_a.id)
    await company_phone_repo.add_relationship(company.id, phone_b.id)
    await company_phone_repo.remove_relationship(company.id, phone_b.id)

    rows = await company_phone_repo.get_by_phone_type(company.id, mobile)

    assert [r.second_id for r in rows] == [phone_a.id]


@pytest.mark.asyncio
async def test_quote_date_range(db, seed):
    now = datetime.now(timezone.utc)
    company = Company(id=uuid.uuid4())
    inside = Quote(id=uuid.uuid4(), quote_date=now - timedelta(days=5))
    outside = Quote(id=uuid.uuid4(), quote_date=now - timedelta(days=60))
    await seed(company, inside, outside)
    await company_quote_repo.add_relationship(company.id, inside.id)
    await company_quote_repo.add_relationship(company.id, outside.id)

    rows = await company_quote_repo.get_by_date_range(company.id, now - timedelta(days=30), now)

    assert [r.second_id for r in rows] == [inside.id]


@pytest.mark.asyncio
async def test_sales_order_status_and_date_range(db, seed):
    now = datetime.now(timezone.utc)
    open_status, closed_status = uuid.uuid4(), uuid.uuid4()
    company = Company(id=uuid.uuid4())
    open_order = SalesOrder(id=uuid.uuid4(), sales_order_status_id=open_status, order_date=now)
    closed_order = SalesOrder(
        id=uuid.uuid4(), sales_order_status_id=closed_status, order_date=now - timedelta(days=400)
    )
    await seed(company, open_order, closed_order)
    await company_sales_order_repo.add_relationship(company.id, open_order.id)
    await company_sales_order_repo.add_relationship(company.id, closed_order.id)

    by_status = await company_sales_order_repo.get_by_sales_order_status(company.id, closed_status)
    by_date = await company_sales_order_repo.get_by_date_range(
        company.id, now - timedelta(days=7), now + timedelta(days=1)
    )

    assert [r.second_id for r in by_status] == [closed_order.id]
    assert [r.second_id for r in by_date] == [open_order.id]


@pytest.mark.asyncio
async def test_linked_addresses_and_companies_are_live_only(db, seed):
    acme = Company(id=uuid.uuid4(), name="Acme")
    defunct = Company(id=uuid.uuid4(), name="Defunct", active=False)
    office = Address(id=uuid.uuid4())
    old_office = Address(id=uuid.uuid4())
    demolished = Address(id=uuid.uuid4(), active=False)
    await seed(acme, defunct, office, old_office, demolished)
    for address in (office, old_office, demolished):
        await company_address_repo.add_relationship(acme.id, address.id)
    await company_address_repo.add_relationship(defunct.id, office.id)
    await company_address_repo.remove_relationship(acme.id, old_office.id)

    addresses = await company_address_repo.get_addresses_for_company(acme.id)
    companies = await company_address_repo.get_companies_for_address(office.id)

    assert [a.id for a in addresses] == [office.id], "Removed links and inactive addresses are excluded"
    assert [c.name for c in companies] == ["Acme"], "Inactive companies are excluded"
    assert await company_address_repo.get_companies_for_address(old_office.id) == []


@pytest.mark.asyncio
async def test_primary_address_is_most_recently_touched(db, seed):
    company = Company(id=uuid.uuid4())
    office = Address(id=uuid.uuid4())
    warehouse = Address(id=uuid.uuid4())
    await seed(company, office, warehouse)
    await company_address_repo.add_relationship(company.id, office.id)
    await company_address_repo.add_relationship(company.id, warehouse.id)
    assert (await company_address_repo.get_primary_address(company.id)).second_id == warehouse.id

    primary = await company_address_repo.set_primary_address(company.id, office.id)

    assert primary is not None and primary.second_id == office.id
    assert (await company_address_repo.get_primary_address(company.id)).second_id == office.id
    assert await company_address_repo.set_primary_address(company.id, uuid.uuid4()) is None
    assert await company_address_repo.update_timestamp(company.id, warehouse.id) is not None


@pytest.mark.asyncio
async def test_phone_set_as_primary(db):
    company_id, phone_id = uuid.uuid4(), uuid.uuid4()
    assert await company_phone_repo.set_as_primary(company_id, phone_id) is False

    await company_phone_repo.add_relationship(company_id, phone_id)

    assert await company_phone_repo.set_as_primary(company_id, phone_id) is True
    assert (await company_phone_repo.get_primary_phone_for_company(company_id)).second_id == phone_id


@pytest.mark.asyncio
async def test_company_person_primary_both_directions(db, seed):
    company = Company(id=uuid.uuid4())
    alice = Person(id=uuid.uuid4(), first_name="Alice")
    bob = Person(id=uuid.uuid4(), first_name="Bob")
    await seed(company, alice, bob)
    await company_person_repo.add_relationship(company.id, alice.id)
    await company_person_repo.add_relationship(company.id, bob.id)

    primary = await company_person_repo.get_primary_person_for_company(company.id)
    assert primary.second_id == bob.id
    assert (await company_person_repo.get_primary_company_for_person(alice.id)).first_id == company.id
    assert await company_person_repo.get_primary_person_for_company(uuid.uuid4()) is None


@pytest.mark.asyncio
async def test_nil_ids_rejected():
    with pytest.raises(ValueError, match="company_id"):
        await company_person_repo.get_by_company_id(NIL_UUID)
    with pytest.raises(ValueError, match="person_id"):
        await company_person_repo.add_relationship(uuid.uuid4(), NIL_UUID)
    with pytest.raises(ValueError, match="email_address_id"):
        await company_email_repo.remove_relationship(uuid.uuid4(), NIL_UUID)
    with pytest.raises(ValueError):
        await company_email_repo.get_primary_email_address(None)


@pytest.mark.asyncio
async def test_company_invoice_add_reactivates(db):
    company_id, invoice_id = uuid.uuid4(), uuid.uuid4()
    await company_invoice_repo.add_relationship(company_id, invoice_id)
    await company_invoice_repo.remove_relationship(company_id, invoice_id)

    again = await company_invoice_repo.add_relationship(company_id, invoice_id)

    assert again.active is True
    assert len(await company_invoice_repo.get_by_company_id(company_id)) == 1
