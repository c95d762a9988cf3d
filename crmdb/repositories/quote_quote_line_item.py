"""Quote <-> line item links (quote_quote_line_item). Adds are insert-or-reactivate."""
import logging
from typing import Optional
from uuid import UUID

from crmdb.models import QuoteQuoteLineItem
from crmdb.repositories.base import JunctionStore, JunctionTable
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

store = JunctionStore(JunctionTable(
    QuoteQuoteLineItem,
    QuoteQuoteLineItem.quote_id,
    QuoteQuoteLineItem.quote_line_item_id,
    upsert_on_add=True,
))


async def get_by_quote_id(quote_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id(quote_id, operation="get_by_quote_id")


async def get_by_quote_line_item_id(quote_line_item_id: UUID) -> list[AssociationRow]:
    return await store.get_by_second_id(quote_line_item_id, operation="get_by_quote_line_item_id")


async def get_by_quote_and_quote_line_item_id(quote_id: UUID, quote_line_item_id: UUID) -> Optional[AssociationRow]:
    return await store.get_by_composite_id(quote_id, quote_line_item_id, operation="get_by_quote_and_quote_line_item_id")


async def exists_by_quote_and_quote_line_item(quote_id: UUID, quote_line_item_id: UUID) -> bool:
    return await store.exists(quote_id, quote_line_item_id, operation="exists_by_quote_and_quote_line_item")


async def add_relationship(quote_id: UUID, quote_line_item_id: UUID) -> AssociationRow:
    return await store.add_relationship(quote_id, quote_line_item_id)


async def remove_relationship(quote_id: UUID, quote_line_item_id: UUID) -> bool:
    return await store.delete(quote_id, quote_line_item_id, operation="remove_relationship")


async def remove_all_for_quote(quote_id: UUID) -> int:
    """Soft-delete every live quote line item link of this quote; returns rows affected."""
    return await store.remove_all_by_first_id(quote_id, operation="remove_all_for_quote")


async def remove_all_for_quote_line_item(quote_line_item_id: UUID) -> int:
    return await store.remove_all_by_second_id(quote_line_item_id, operation="remove_all_for_quote_line_item")


async def delete_by_quote_id(quote_id: UUID) -> bool:
    return await store.delete_by_first_id(quote_id, operation="delete_by_quote_id")


async def delete_by_quote_line_item_id(quote_line_item_id: UUID) -> bool:
    return await store.delete_by_second_id(quote_line_item_id, operation="delete_by_quote_line_item_id")
