"""Invoice <-> line item links (invoice_invoice_line_item).

Line items are re-attached by reactivating the existing row, so adds are
insert-or-reactivate.
"""
import logging
from typing import Optional
from uuid import UUID

from crmdb.models import InvoiceInvoiceLineItem
from crmdb.repositories.base import JunctionStore, JunctionTable
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

store = JunctionStore(JunctionTable(
    InvoiceInvoiceLineItem,
    InvoiceInvoiceLineItem.invoice_id,
    InvoiceInvoiceLineItem.invoice_line_item_id,
    upsert_on_add=True,
))


async def get_by_invoice_id(invoice_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id(invoice_id, operation="get_by_invoice_id")


async def get_by_invoice_line_item_id(invoice_line_item_id: UUID) -> list[AssociationRow]:
    return await store.get_by_second_id(invoice_line_item_id, operation="get_by_invoice_line_item_id")


async def get_by_invoice_and_invoice_line_item_id(invoice_id: UUID, invoice_line_item_id: UUID) -> Optional[AssociationRow]:
    return await store.get_by_composite_id(invoice_id, invoice_line_item_id, operation="get_by_invoice_and_invoice_line_item_id")


async def exists_by_invoice_and_invoice_line_item(invoice_id: UUID, invoice_line_item_id: UUID) -> bool:
    return await store.exists(invoice_id, invoice_line_item_id, operation="exists_by_invoice_and_invoice_line_item")


async def add_relationship(invoice_id: UUID, invoice_line_item_id: UUID) -> AssociationRow:
    return await store.add_relationship(invoice_id, invoice_line_item_id)


async def remove_relationship(invoice_id: UUID, invoice_line_item_id: UUID) -> bool:
    return await store.delete(invoice_id, invoice_line_item_id, operation="remove_relationship")


async def remove_all_for_invoice(invoice_id: UUID) -> int:
    """Soft-delete every live invoice line item link of this invoice; returns rows affected."""
    return await store.remove_all_by_first_id(invoice_id, operation="remove_all_for_invoice")


async def remove_all_for_invoice_line_item(invoice_line_item_id: UUID) -> int:
    return await store.remove_all_by_second_id(invoice_line_item_id, operation="remove_all_for_invoice_line_item")


async def delete_by_invoice_id(invoice_id: UUID) -> bool:
    return await store.delete_by_first_id(invoice_id, operation="delete_by_invoice_id")


async def delete_by_invoice_line_item_id(invoice_line_item_id: UUID) -> bool:
    return await store.delete_by_second_id(invoice_line_item_id, operation="delete_by_invoice_line_item_id")
