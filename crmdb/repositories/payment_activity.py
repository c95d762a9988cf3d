"""Payment <-> activity links (payment_activity). Adds are insert-or-reactivate."""
import logging
from typing import Optional
from uuid import UUID

from crmdb.models import PaymentActivity
from crmdb.repositories.base import JunctionStore, JunctionTable
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

store = JunctionStore(JunctionTable(
    PaymentActivity,
    PaymentActivity.payment_id,
    PaymentActivity.activity_id,
    upsert_on_add=True,
))


async def get_by_payment_id(payment_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id(payment_id, operation="get_by_payment_id")


async def get_by_activity_id(activity_id: UUID) -> list[AssociationRow]:
    return await store.get_by_second_id(activity_id, operation="get_by_activity_id")


async def get_by_payment_and_activity_id(payment_id: UUID, activity_id: UUID) -> Optional[AssociationRow]:
    return await store.get_by_composite_id(payment_id, activity_id, operation="get_by_payment_and_activity_id")


async def exists_by_payment_and_activity(payment_id: UUID, activity_id: UUID) -> bool:
    return await store.exists(payment_id, activity_id, operation="exists_by_payment_and_activity")


async def add_relationship(payment_id: UUID, activity_id: UUID) -> AssociationRow:
    return await store.add_relationship(payment_id, activity_id)


async def remove_relationship(payment_id: UUID, activity_id: UUID) -> bool:
    return await store.delete(payment_id, activity_id, operation="remove_relationship")


async def remove_all_for_payment(payment_id: UUID) -> int:
    return await store.remove_all_by_first_id(payment_id, operation="remove_all_for_payment")


async def remove_all_for_activity(activity_id: UUID) -> int:
    return await store.remove_all_by_second_id(activity_id, operation="remove_all_for_activity")


async def delete_by_payment_id(payment_id: UUID) -> bool:
    return await store.delete_by_first_id(payment_id, operation="delete_by_payment_id")


async def delete_by_activity_id(activity_id: UUID) -> bool:
    return await store.delete_by_second_id(activity_id, operation="delete_by_activity_id")
