"""Invoice <-> note links (invoice_note). Adds are insert-or-reactivate."""
import logging
from typing import Optional
from uuid import UUID

from crmdb.models import InvoiceNote
from crmdb.repositories.base import JunctionStore, JunctionTable
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

store = JunctionStore(JunctionTable(
    InvoiceNote,
    InvoiceNote.invoice_id,
    InvoiceNote.note_id,
    upsert_on_add=True,
))


async def get_by_invoice_id(invoice_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id(invoice_id, operation="get_by_invoice_id")


async def get_by_note_id(note_id: UUID) -> list[AssociationRow]:
    return await store.get_by_second_id(note_id, operation="get_by_note_id")


async def get_by_invoice_and_note_id(invoice_id: UUID, note_id: UUID) -> Optional[AssociationRow]:
    return await store.get_by_composite_id(invoice_id, note_id, operation="get_by_invoice_and_note_id")


async def exists_by_invoice_and_note(invoice_id: UUID, note_id: UUID) -> bool:
    return await store.exists(invoice_id, note_id, operation="exists_by_invoice_and_note")


async def add_relationship(invoice_id: UUID, note_id: UUID) -> AssociationRow:
    return await store.add_relationship(invoice_id, note_id)


async def remove_relationship(invoice_id: UUID, note_id: UUID) -> bool:
    return await store.delete(invoice_id, note_id, operation="remove_relationship")


async def remove_all_for_invoice(invoice_id: UUID) -> int:
    return await store.remove_all_by_first_id(invoice_id, operation="remove_all_for_invoice")


async def remove_all_for_note(note_id: UUID) -> int:
    return await store.remove_all_by_second_id(note_id, operation="remove_all_for_note")


async def delete_by_invoice_id(invoice_id: UUID) -> bool:
    return await store.delete_by_first_id(invoice_id, operation="delete_by_invoice_id")


async def delete_by_note_id(note_id: UUID) -> bool:
    return await store.delete_by_second_id(note_id, operation="delete_by_note_id")
