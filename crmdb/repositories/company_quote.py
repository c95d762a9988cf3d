"""Company <-> quote links (company_quote), with a quote date range read."""
import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from crmdb.models import CompanyQuote, Quote
from crmdb.repositories.base import JunctionStore, JunctionTable
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

store = JunctionStore(JunctionTable(
    CompanyQuote,
    CompanyQuote.company_id,
    CompanyQuote.quote_id,
))


async def get_by_company_id(company_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id(company_id, operation="get_by_company_id")


async def get_by_quote_id(quote_id: UUID) -> list[AssociationRow]:
    return await store.get_by_second_id(quote_id, operation="get_by_quote_id")


async def get_by_company_and_quote_id(company_id: UUID, quote_id: UUID) -> Optional[AssociationRow]:
    return await store.get_by_composite_id(company_id, quote_id, operation="get_by_company_and_quote_id")


async def exists_by_company_and_quote(company_id: UUID, quote_id: UUID) -> bool:
    return await store.exists(company_id, quote_id, operation="exists_by_company_and_quote")


async def add_relationship(company_id: UUID, quote_id: UUID) -> AssociationRow:
    return await store.add_relationship(company_id, quote_id)


async def remove_relationship(company_id: UUID, quote_id: UUID) -> bool:
    return await store.delete(company_id, quote_id, operation="remove_relationship")


async def remove_all_for_company(company_id: UUID) -> int:
    """Soft-delete every live quote link of this company; returns rows affected."""
    return await store.remove_all_by_first_id(company_id, operation="remove_all_for_company")


async def remove_all_for_quote(quote_id: UUID) -> int:
    return await store.remove_all_by_second_id(quote_id, operation="remove_all_for_quote")


async def delete_by_company_id(company_id: UUID) -> bool:
    return await store.delete_by_first_id(company_id, operation="delete_by_company_id")


async def delete_by_quote_id(quote_id: UUID) -> bool:
    return await store.delete_by_second_id(quote_id, operation="delete_by_quote_id")


async def get_by_date_range(company_id: UUID, start: datetime, end: datetime) -> list[AssociationRow]:
    """Live quotes of this company with start <= quote_date <= end."""
    return await store.get_by_first_id_joined(
        company_id,
        Quote,
        Quote.quote_date >= start,
        Quote.quote_date <= end,
        operation="get_by_date_range",
        start=start,
        end=end,
    )
