"""Company <-> activity links (company_activity)."""
import logging
from typing import Optional
from uuid import UUID

from crmdb.models import CompanyActivity
from crmdb.repositories.base import JunctionStore, JunctionTable
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

store = JunctionStore(JunctionTable(
    CompanyActivity,
    CompanyActivity.company_id,
    CompanyActivity.activity_id,
))


async def get_by_company_id(company_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id(company_id, operation="get_by_company_id")


async def get_by_activity_id(activity_id: UUID) -> list[AssociationRow]:
    return await store.get_by_second_id(activity_id, operation="get_by_activity_id")


async def get_by_company_and_activity_id(company_id: UUID, activity_id: UUID) -> Optional[AssociationRow]:
    return await store.get_by_composite_id(company_id, activity_id, operation="get_by_company_and_activity_id")


async def exists_by_company_and_activity(company_id: UUID, activity_id: UUID) -> bool:
    return await store.exists(company_id, activity_id, operation="exists_by_company_and_activity")


async def add_relationship(company_id: UUID, activity_id: UUID) -> AssociationRow:
    return await store.add_relationship(company_id, activity_id)


async def remove_relationship(company_id: UUID, activity_id: UUID) -> bool:
    return await store.delete(company_id, activity_id, operation="remove_relationship")


async def remove_all_for_company(company_id: UUID) -> int:
    """Soft-delete every live activity link of this company; returns rows affected."""
    return await store.remove_all_by_first_id(company_id, operation="remove_all_for_company")


async def remove_all_for_activity(activity_id: UUID) -> int:
    return await store.remove_all_by_second_id(activity_id, operation="remove_all_for_activity")


async def delete_by_company_id(company_id: UUID) -> bool:
    return await store.delete_by_first_id(company_id, operation="delete_by_company_id")


async def delete_by_activity_id(activity_id: UUID) -> bool:
    return await store.delete_by_second_id(activity_id, operation="delete_by_activity_id")
