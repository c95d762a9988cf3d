"""Company <-> invoice links (company_invoice).

Adding an existing pair reactivates it instead of failing.
"""
import logging
from typing import Optional
from uuid import UUID

from crmdb.models import CompanyInvoice
from crmdb.repositories.base import JunctionStore, JunctionTable
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

store = JunctionStore(JunctionTable(
    CompanyInvoice,
    CompanyInvoice.company_id,
    CompanyInvoice.invoice_id,
    upsert_on_add=True,
))


async def get_by_company_id(company_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id(company_id, operation="get_by_company_id")


async def get_by_invoice_id(invoice_id: UUID) -> list[AssociationRow]:
    return await store.get_by_second_id(invoice_id, operation="get_by_invoice_id")


async def get_by_company_and_invoice_id(company_id: UUID, invoice_id: UUID) -> Optional[AssociationRow]:
    return await store.get_by_composite_id(company_id, invoice_id, operation="get_by_company_and_invoice_id")


async def exists_by_company_and_invoice(company_id: UUID, invoice_id: UUID) -> bool:
    return await store.exists(company_id, invoice_id, operation="exists_by_company_and_invoice")


async def add_relationship(company_id: UUID, invoice_id: UUID) -> AssociationRow:
    return await store.add_relationship(company_id, invoice_id)


async def remove_relationship(company_id: UUID, invoice_id: UUID) -> bool:
    return await store.delete(company_id, invoice_id, operation="remove_relationship")


async def remove_all_for_company(company_id: UUID) -> int:
    """Soft-delete every live invoice link of this company; returns rows affected."""
    return await store.remove_all_by_first_id(company_id, operation="remove_all_for_company")


async def remove_all_for_invoice(invoice_id: UUID) -> int:
    return await store.remove_all_by_second_id(invoice_id, operation="remove_all_for_invoice")


async def delete_by_company_id(company_id: UUID) -> bool:
    return await store.delete_by_first_id(company_id, operation="delete_by_company_id")


async def delete_by_invoice_id(invoice_id: UUID) -> bool:
    return await store.delete_by_second_id(invoice_id, operation="delete_by_invoice_id")
