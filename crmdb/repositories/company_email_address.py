"""Company <-> email address links (company_email_address).

Ids are validated up front (nil UUID -> ValueError). The primary address is
the live link touched most recently; the email_address.is_primary flag is
only maintained for people.
"""
import logging
from typing import Optional
from uuid import UUID

from crmdb.models import CompanyEmailAddress, EmailAddress
from crmdb.repositories.base import JunctionStore, JunctionTable, require_id
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

store = JunctionStore(JunctionTable(
    CompanyEmailAddress,
    CompanyEmailAddress.company_id,
    CompanyEmailAddress.email_address_id,
))


async def get_by_company_id(company_id: UUID) -> list[AssociationRow]:
    require_id(company_id, "company_id")
    return await store.get_by_first_id(company_id, operation="get_by_company_id")


async def get_by_email_address_id(email_address_id: UUID) -> list[AssociationRow]:
    require_id(email_address_id, "email_address_id")
    return await store.get_by_second_id(email_address_id, operation="get_by_email_address_id")


async def get_by_company_and_email_address_id(
    company_id: UUID, email_address_id: UUID
) -> Optional[AssociationRow]:
    require_id(company_id, "company_id")
    require_id(email_address_id, "email_address_id")
    return await store.get_by_composite_id(
        company_id, email_address_id, operation="get_by_company_and_email_address_id"
    )


async def exists_by_company_and_email_address(company_id: UUID, email_address_id: UUID) -> bool:
    require_id(company_id, "company_id")
    require_id(email_address_id, "email_address_id")
    return await store.exists(
        company_id, email_address_id, operation="exists_by_company_and_email_address"
    )


async def add_relationship(company_id: UUID, email_address_id: UUID) -> AssociationRow:
    require_id(company_id, "company_id")
    require_id(email_address_id, "email_address_id")
    return await store.add_relationship(company_id, email_address_id)


async def remove_relationship(company_id: UUID, email_address_id: UUID) -> bool:
    require_id(company_id, "company_id")
    require_id(email_address_id, "email_address_id")
    return await store.delete(company_id, email_address_id, operation="remove_relationship")


async def remove_all_for_company(company_id: UUID) -> int:
    require_id(company_id, "company_id")
    return await store.remove_all_by_first_id(company_id, operation="remove_all_for_company")


async def remove_all_for_email_address(email_address_id: UUID) -> int:
    require_id(email_address_id, "email_address_id")
    return await store.remove_all_by_second_id(
        email_address_id, operation="remove_all_for_email_address"
    )


async def delete_by_company_id(company_id: UUID) -> bool:
    require_id(company_id, "company_id")
    return await store.delete_by_first_id(company_id, operation="delete_by_company_id")


async def delete_by_email_address_id(email_address_id: UUID) -> bool:
    require_id(email_address_id, "email_address_id")
    return await store.delete_by_second_id(email_address_id, operation="delete_by_email_address_id")


async def get_by_email_address_type(
    company_id: UUID, email_address_type_id: UUID
) -> list[AssociationRow]:
    require_id(company_id, "company_id")
    require_id(email_address_type_id, "email_address_type_id")
    return await store.get_by_first_id_joined(
        company_id,
        EmailAddress,
        EmailAddress.email_address_type_id == email_address_type_id,
        operation="get_by_email_address_type",
        email_address_type_id=email_address_type_id,
    )


async def get_primary_email_address(company_id: UUID) -> Optional[AssociationRow]:
    require_id(company_id, "company_id")
    return await store.get_latest_by_first_id(company_id, operation="get_primary_email_address")


async def set_primary_email_address(company_id: UUID, email_address_id: UUID) -> Optional[AssociationRow]:
    """Refresh the link's modified_date and return it; None if not linked."""
    require_id(company_id, "company_id")
    require_id(email_address_id, "email_address_id")
    return await store.touch(company_id, email_address_id, operation="set_primary_email_address")
