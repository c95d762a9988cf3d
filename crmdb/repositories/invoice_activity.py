"""Invoice <-> activity links (invoice_activity)."""
import logging
from typing import Optional
from uuid import UUID

from crmdb.models import InvoiceActivity
from crmdb.repositories.base import JunctionStore, JunctionTable
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

store = JunctionStore(JunctionTable(
    InvoiceActivity,
    InvoiceActivity.invoice_id,
    InvoiceActivity.activity_id,
))


async def get_by_invoice_id(invoice_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id(invoice_id, operation="get_by_invoice_id")


async def get_by_activity_id(activity_id: UUID) -> list[AssociationRow]:
    return await store.get_by_second_id(activity_id, operation="get_by_activity_id")


async def get_by_invoice_and_activity_id(invoice_id: UUID, activity_id: UUID) -> Optional[AssociationRow]:
    return await store.get_by_composite_id(invoice_id, activity_id, operation="get_by_invoice_and_activity_id")


async def exists_by_invoice_and_activity(invoice_id: UUID, activity_id: UUID) -> bool:
    return await store.exists(invoice_id, activity_id, operation="exists_by_invoice_and_activity")


async def add_relationship(invoice_id: UUID, activity_id: UUID) -> AssociationRow:
    return await store.add_relationship(invoice_id, activity_id)


async def remove_relationship(invoice_id: UUID, activity_id: UUID) -> bool:
    return await store.delete(invoice_id, activity_id, operation="remove_relationship")


async def remove_all_for_invoice(invoice_id: UUID) -> int:
    return await store.remove_all_by_first_id(invoice_id, operation="remove_all_for_invoice")


async def remove_all_for_activity(activity_id: UUID) -> int:
    return await store.remove_all_by_second_id(activity_id, operation="remove_all_for_activity")


async def delete_by_invoice_id(invoice_id: UUID) -> bool:
    return await store.delete_by_first_id(invoice_id, operation="delete_by_invoice_id")


async def delete_by_activity_id(activity_id: UUID) -> bool:
    return await store.delete_by_second_id(activity_id, operation="delete_by_activity_id")
