"""Company <-> sales order links (company_sales_order).

Reads can be narrowed by order date range or by sales order status.
"""
import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from crmdb.models import CompanySalesOrder, SalesOrder
from crmdb.repositories.base import JunctionStore, JunctionTable
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

store = JunctionStore(JunctionTable(
    CompanySalesOrder,
    CompanySalesOrder.company_id,
    CompanySalesOrder.sales_order_id,
))


async def get_by_company_id(company_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id(company_id, operation="get_by_company_id")


async def get_by_sales_order_id(sales_order_id: UUID) -> list[AssociationRow]:
    return await store.get_by_second_id(sales_order_id, operation="get_by_sales_order_id")


async def get_by_company_and_sales_order_id(company_id: UUID, sales_order_id: UUID) -> Optional[AssociationRow]:
    return await store.get_by_composite_id(company_id, sales_order_id, operation="get_by_company_and_sales_order_id")


async def exists_by_company_and_sales_order(company_id: UUID, sales_order_id: UUID) -> bool:
    return await store.exists(company_id, sales_order_id, operation="exists_by_company_and_sales_order")


async def add_relationship(company_id: UUID, sales_order_id: UUID) -> AssociationRow:
    return await store.add_relationship(company_id, sales_order_id)


async def remove_relationship(company_id: UUID, sales_order_id: UUID) -> bool:
    return await store.delete(company_id, sales_order_id, operation="remove_relationship")


async def remove_all_for_company(company_id: UUID) -> int:
    """Soft-delete every live sales order link of this company; returns rows affected."""
    return await store.remove_all_by_first_id(company_id, operation="remove_all_for_company")


async def remove_all_for_sales_order(sales_order_id: UUID) -> int:
    return await store.remove_all_by_second_id(sales_order_id, operation="remove_all_for_sales_order")


async def delete_by_company_id(company_id: UUID) -> bool:
    return await store.delete_by_first_id(company_id, operation="delete_by_company_id")


async def delete_by_sales_order_id(sales_order_id: UUID) -> bool:
    return await store.delete_by_second_id(sales_order_id, operation="delete_by_sales_order_id")


async def get_by_date_range(company_id: UUID, start: datetime, end: datetime) -> list[AssociationRow]:
    """Live sales orders of this company with start <= order_date <= end."""
    return await store.get_by_first_id_joined(
        company_id,
        SalesOrder,
        SalesOrder.order_date >= start,
        SalesOrder.order_date <= end,
        operation="get_by_date_range",
        start=start,
        end=end,
    )


async def get_by_sales_order_status(company_id: UUID, sales_order_status_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id_joined(
        company_id,
        SalesOrder,
        SalesOrder.sales_order_status_id == sales_order_status_id,
        operation="get_by_sales_order_status",
        sales_order_status_id=sales_order_status_id,
    )
