"""Person <-> sales order links (person_sales_order). Adds are insert-or-reactivate."""
import logging
from typing import Optional
from uuid import UUID

from crmdb.models import PersonSalesOrder
from crmdb.repositories.base import JunctionStore, JunctionTable
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

store = JunctionStore(JunctionTable(
    PersonSalesOrder,
    PersonSalesOrder.person_id,
    PersonSalesOrder.sales_order_id,
    upsert_on_add=True,
))


async def get_by_person_id(person_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id(person_id, operation="get_by_person_id")


async def get_by_sales_order_id(sales_order_id: UUID) -> list[AssociationRow]:
    return await store.get_by_second_id(sales_order_id, operation="get_by_sales_order_id")


async def get_by_person_and_sales_order_id(person_id: UUID, sales_order_id: UUID) -> Optional[AssociationRow]:
    return await store.get_by_composite_id(person_id, sales_order_id, operation="get_by_person_and_sales_order_id")


async def exists_by_person_and_sales_order(person_id: UUID, sales_order_id: UUID) -> bool:
    return await store.exists(person_id, sales_order_id, operation="exists_by_person_and_sales_order")


async def add_relationship(person_id: UUID, sales_order_id: UUID) -> AssociationRow:
    return await store.add_relationship(person_id, sales_order_id)


async def remove_relationship(person_id: UUID, sales_order_id: UUID) -> bool:
    return await store.delete(person_id, sales_order_id, operation="remove_relationship")


async def remove_all_for_person(person_id: UUID) -> int:
    """Soft-delete every live sales order link of this person; returns rows affected."""
    return await store.remove_all_by_first_id(person_id, operation="remove_all_for_person")


async def remove_all_for_sales_order(sales_order_id: UUID) -> int:
    return await store.remove_all_by_second_id(sales_order_id, operation="remove_all_for_sales_order")


async def delete_by_person_id(person_id: UUID) -> bool:
    return await store.delete_by_first_id(person_id, operation="delete_by_person_id")


async def delete_by_sales_order_id(sales_order_id: UUID) -> bool:
    return await store.delete_by_second_id(sales_order_id, operation="delete_by_sales_order_id")
