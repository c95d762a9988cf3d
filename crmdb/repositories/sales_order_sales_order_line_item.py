"""Sales order <-> line item links (sales_order_sales_order_line_item).

Adds are insert-or-reactivate.
"""
import logging
from typing import Optional
from uuid import UUID

from crmdb.models import SalesOrderSalesOrderLineItem
from crmdb.repositories.base import JunctionStore, JunctionTable
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

store = JunctionStore(JunctionTable(
    SalesOrderSalesOrderLineItem,
    SalesOrderSalesOrderLineItem.sales_order_id,
    SalesOrderSalesOrderLineItem.sales_order_line_item_id,
    upsert_on_add=True,
))


async def get_by_sales_order_id(sales_order_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id(sales_order_id, operation="get_by_sales_order_id")


async def get_by_sales_order_line_item_id(sales_order_line_item_id: UUID) -> list[AssociationRow]:
    return await store.get_by_second_id(sales_order_line_item_id, operation="get_by_sales_order_line_item_id")


async def get_by_sales_order_and_sales_order_line_item_id(sales_order_id: UUID, sales_order_line_item_id: UUID) -> Optional[AssociationRow]:
    return await store.get_by_composite_id(sales_order_id, sales_order_line_item_id, operation="get_by_sales_order_and_sales_order_line_item_id")


async def exists_by_sales_order_and_sales_order_line_item(sales_order_id: UUID, sales_order_line_item_id: UUID) -> bool:
    return await store.exists(sales_order_id, sales_order_line_item_id, operation="exists_by_sales_order_and_sales_order_line_item")


async def add_relationship(sales_order_id: UUID, sales_order_line_item_id: UUID) -> AssociationRow:
    return await store.add_relationship(sales_order_id, sales_order_line_item_id)


async def remove_relationship(sales_order_id: UUID, sales_order_line_item_id: UUID) -> bool:
    return await store.delete(sales_order_id, sales_order_line_item_id, operation="remove_relationship")


async def remove_all_for_sales_order(sales_order_id: UUID) -> int:
    """Soft-delete every live sales order line item link of this sales order; returns rows affected."""
    return await store.remove_all_by_first_id(sales_order_id, operation="remove_all_for_sales_order")


async def remove_all_for_sales_order_line_item(sales_order_line_item_id: UUID) -> int:
    return await store.remove_all_by_second_id(sales_order_line_item_id, operation="remove_all_for_sales_order_line_item")


async def delete_by_sales_order_id(sales_order_id: UUID) -> bool:
    return await store.delete_by_first_id(sales_order_id, operation="delete_by_sales_order_id")


async def delete_by_sales_order_line_item_id(sales_order_line_item_id: UUID) -> bool:
    return await store.delete_by_second_id(sales_order_line_item_id, operation="delete_by_sales_order_line_item_id")
