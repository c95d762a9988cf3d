"""Company <-> payment links (company_payment). Adds are insert-or-reactivate."""
import logging
from typing import Optional
from uuid import UUID

from crmdb.models import CompanyPayment
from crmdb.repositories.base import JunctionStore, JunctionTable
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

store = JunctionStore(JunctionTable(
    CompanyPayment,
    CompanyPayment.company_id,
    CompanyPayment.payment_id,
    upsert_on_add=True,
))


async def get_by_company_id(company_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id(company_id, operation="get_by_company_id")


async def get_by_payment_id(payment_id: UUID) -> list[AssociationRow]:
    return await store.get_by_second_id(payment_id, operation="get_by_payment_id")


async def get_by_company_and_payment_id(company_id: UUID, payment_id: UUID) -> Optional[AssociationRow]:
    return await store.get_by_composite_id(company_id, payment_id, operation="get_by_company_and_payment_id")


async def exists_by_company_and_payment(company_id: UUID, payment_id: UUID) -> bool:
    return await store.exists(company_id, payment_id, operation="exists_by_company_and_payment")


async def add_relationship(company_id: UUID, payment_id: UUID) -> AssociationRow:
    return await store.add_relationship(company_id, payment_id)


async def remove_relationship(company_id: UUID, payment_id: UUID) -> bool:
    return await store.delete(company_id, payment_id, operation="remove_relationship")


async def remove_all_for_company(company_id: UUID) -> int:
    return await store.remove_all_by_first_id(company_id, operation="remove_all_for_company")


async def remove_all_for_payment(payment_id: UUID) -> int:
    return await store.remove_all_by_second_id(payment_id, operation="remove_all_for_payment")


async def delete_by_company_id(company_id: UUID) -> bool:
    return await store.delete_by_first_id(company_id, operation="delete_by_company_id")


async def delete_by_payment_id(payment_id: UUID) -> bool:
    return await store.delete_by_second_id(payment_id, operation="delete_by_payment_id")
