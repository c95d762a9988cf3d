"""Company <-> phone links (company_phone).

The primary phone is the live link touched most recently.
"""
import logging
from typing import Optional
from uuid import UUID

from crmdb.models import CompanyPhone, Phone
from crmdb.repositories.base import JunctionStore, JunctionTable
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

store = JunctionStore(JunctionTable(
    CompanyPhone,
    CompanyPhone.company_id,
    CompanyPhone.phone_id,
))


async def get_by_company_id(company_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id(company_id, operation="get_by_company_id")


async def get_by_phone_id(phone_id: UUID) -> list[AssociationRow]:
    return await store.get_by_second_id(phone_id, operation="get_by_phone_id")


async def get_by_company_and_phone_id(company_id: UUID, phone_id: UUID) -> Optional[AssociationRow]:
    return await store.get_by_composite_id(company_id, phone_id, operation="get_by_company_and_phone_id")


async def exists_by_company_and_phone(company_id: UUID, phone_id: UUID) -> bool:
    return await store.exists(company_id, phone_id, operation="exists_by_company_and_phone")


async def add_relationship(company_id: UUID, phone_id: UUID) -> AssociationRow:
    return await store.add_relationship(company_id, phone_id)


async def remove_relationship(company_id: UUID, phone_id: UUID) -> bool:
    return await store.delete(company_id, phone_id, operation="remove_relationship")


async def remove_all_for_company(company_id: UUID) -> int:
    """Soft-delete every live phone link of this company; returns rows affected."""
    return await store.remove_all_by_first_id(company_id, operation="remove_all_for_company")


async def remove_all_for_phone(phone_id: UUID) -> int:
    return await store.remove_all_by_second_id(phone_id, operation="remove_all_for_phone")


async def delete_by_company_id(company_id: UUID) -> bool:
    return await store.delete_by_first_id(company_id, operation="delete_by_company_id")


async def delete_by_phone_id(phone_id: UUID) -> bool:
    return await store.delete_by_second_id(phone_id, operation="delete_by_phone_id")


async def get_by_phone_type(company_id: UUID, phone_type_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id_joined(
        company_id,
        Phone,
        Phone.phone_type_id == phone_type_id,
        operation="get_by_phone_type",
        phone_type_id=phone_type_id,
    )


async def get_primary_phone_for_company(company_id: UUID) -> Optional[AssociationRow]:
    return await store.get_latest_by_first_id(company_id, operation="get_primary_phone_for_company")


async def set_primary_phone(company_id: UUID, phone_id: UUID) -> Optional[AssociationRow]:
    """Refresh the link's modified_date and return it; None if not linked."""
    return await store.touch(company_id, phone_id, operation="set_primary_phone")


async def set_as_primary(company_id: UUID, phone_id: UUID) -> bool:
    """Same as set_primary_phone without the read back."""
    return await store.refresh(company_id, phone_id, operation="set_as_primary")
