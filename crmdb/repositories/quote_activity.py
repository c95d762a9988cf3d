"""Quote <-> activity links (quote_activity)."""
import logging
from typing import Optional
from uuid import UUID

from crmdb.models import QuoteActivity
from crmdb.repositories.base import JunctionStore, JunctionTable
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

store = JunctionStore(JunctionTable(
    QuoteActivity,
    QuoteActivity.quote_id,
    QuoteActivity.activity_id,
))


async def get_by_quote_id(quote_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id(quote_id, operation="get_by_quote_id")


async def get_by_activity_id(activity_id: UUID) -> list[AssociationRow]:
    return await store.get_by_second_id(activity_id, operation="get_by_activity_id")


async def get_by_quote_and_activity_id(quote_id: UUID, activity_id: UUID) -> Optional[AssociationRow]:
    return await store.get_by_composite_id(quote_id, activity_id, operation="get_by_quote_and_activity_id")


async def exists_by_quote_and_activity(quote_id: UUID, activity_id: UUID) -> bool:
    return await store.exists(quote_id, activity_id, operation="exists_by_quote_and_activity")


async def add_relationship(quote_id: UUID, activity_id: UUID) -> AssociationRow:
    return await store.add_relationship(quote_id, activity_id)


async def remove_relationship(quote_id: UUID, activity_id: UUID) -> bool:
    return await store.delete(quote_id, activity_id, operation="remove_relationship")


async def remove_all_for_quote(quote_id: UUID) -> int:
    return await store.remove_all_by_first_id(quote_id, operation="remove_all_for_quote")


async def remove_all_for_activity(activity_id: UUID) -> int:
    return await store.remove_all_by_second_id(activity_id, operation="remove_all_for_activity")


async def delete_by_quote_id(quote_id: UUID) -> bool:
    return await store.delete_by_first_id(quote_id, operation="delete_by_quote_id")


async def delete_by_activity_id(activity_id: UUID) -> bool:
    return await store.delete_by_second_id(activity_id, operation="delete_by_activity_id")
