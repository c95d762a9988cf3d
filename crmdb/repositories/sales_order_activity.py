"""Sales order <-> activity links (sales_order_activity)."""
import logging
from typing import Optional
from uuid import UUID

from crmdb.models import SalesOrderActivity
from crmdb.repositories.base import JunctionStore, JunctionTable
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

store = JunctionStore(JunctionTable(
    SalesOrderActivity,
    SalesOrderActivity.sales_order_id,
    SalesOrderActivity.activity_id,
))


async def get_by_sales_order_id(sales_order_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id(sales_order_id, operation="get_by_sales_order_id")


async def get_by_activity_id(activity_id: UUID) -> list[AssociationRow]:
    return await store.get_by_second_id(activity_id, operation="get_by_activity_id")


async def get_by_sales_order_and_activity_id(sales_order_id: UUID, activity_id: UUID) -> Optional[AssociationRow]:
    return await store.get_by_composite_id(sales_order_id, activity_id, operation="get_by_sales_order_and_activity_id")


async def exists_by_sales_order_and_activity(sales_order_id: UUID, activity_id: UUID) -> bool:
    return await store.exists(sales_order_id, activity_id, operation="exists_by_sales_order_and_activity")


async def add_relationship(sales_order_id: UUID, activity_id: UUID) -> AssociationRow:
    return await store.add_relationship(sales_order_id, activity_id)


async def remove_relationship(sales_order_id: UUID, activity_id: UUID) -> bool:
    return await store.delete(sales_order_id, activity_id, operation="remove_relationship")


async def remove_all_for_sales_order(sales_order_id: UUID) -> int:
    return await store.remove_all_by_first_id(sales_order_id, operation="remove_all_for_sales_order")


async def remove_all_for_activity(activity_id: UUID) -> int:
    return await store.remove_all_by_second_id(activity_id, operation="remove_all_for_activity")


async def delete_by_sales_order_id(sales_order_id: UUID) -> bool:
    return await store.delete_by_first_id(sales_order_id, operation="delete_by_sales_order_id")


async def delete_by_activity_id(activity_id: UUID) -> bool:
    return await store.delete_by_second_id(activity_id, operation="delete_by_activity_id")
