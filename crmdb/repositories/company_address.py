"""Company <-> address links (company_address).

There is no primary flag on the table; the primary address is the live link
touched most recently.
"""
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from crmdb.models import Address, Company, CompanyAddress
from crmdb.repositories.base import JunctionStore, JunctionTable
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

store = JunctionStore(JunctionTable(
    CompanyAddress,
    CompanyAddress.company_id,
    CompanyAddress.address_id,
))


async def get_by_company_id(company_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id(company_id, operation="get_by_company_id")


async def get_by_address_id(address_id: UUID) -> list[AssociationRow]:
    return await store.get_by_second_id(address_id, operation="get_by_address_id")


async def get_by_company_and_address_id(company_id: UUID, address_id: UUID) -> Optional[AssociationRow]:
    return await store.get_by_composite_id(company_id, address_id, operation="get_by_company_and_address_id")


async def exists_by_company_and_address(company_id: UUID, address_id: UUID) -> bool:
    return await store.exists(company_id, address_id, operation="exists_by_company_and_address")


async def add_relationship(company_id: UUID, address_id: UUID) -> AssociationRow:
    return await store.add_relationship(company_id, address_id)


async def remove_relationship(company_id: UUID, address_id: UUID) -> bool:
    return await store.delete(company_id, address_id, operation="remove_relationship")


async def remove_all_for_company(company_id: UUID) -> int:
    """Soft-delete every live address link of this company; returns rows affected."""
    return await store.remove_all_by_first_id(company_id, operation="remove_all_for_company")


async def remove_all_for_address(address_id: UUID) -> int:
    return await store.remove_all_by_second_id(address_id, operation="remove_all_for_address")


async def delete_by_company_id(company_id: UUID) -> bool:
    return await store.delete_by_first_id(company_id, operation="delete_by_company_id")


async def delete_by_address_id(address_id: UUID) -> bool:
    return await store.delete_by_second_id(address_id, operation="delete_by_address_id")


async def get_by_address_type(company_id: UUID, address_type_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id_joined(
        company_id,
        Address,
        Address.address_type_id == address_type_id,
        operation="get_by_address_type",
        address_type_id=address_type_id,
    )


async def get_primary_address(company_id: UUID) -> Optional[AssociationRow]:
    """The live address link with the latest modified_date, or None."""
    return await store.get_latest_by_first_id(company_id, operation="get_primary_address")


async def set_primary_address(company_id: UUID, address_id: UUID) -> Optional[AssociationRow]:
    """Mark the link as primary by refreshing its modified_date.

    Returns the re-read link, or None when the company has no live link to
    this address.
    """
    return await store.touch(company_id, address_id, operation="set_primary_address")


async def update_timestamp(company_id: UUID, address_id: UUID) -> Optional[AssociationRow]:
    return await store.touch(company_id, address_id, operation="update_timestamp")


async def get_addresses_for_company(company_id: UUID) -> list[Address]:
    """Live addresses linked to the company through a live link."""

    async def _query(session: AsyncSession) -> list[Address]:
        result = await session.execute(
            select(Address)
            .join(CompanyAddress, CompanyAddress.address_id == Address.id)
            .where(CompanyAddress.company_id == company_id)
            .where(CompanyAddress.active == True)
            .where(Address.active == True)
        )
        return list(result.scalars().all())

    return await store.execute("get_addresses_for_company", _query, company_id=company_id)


async def get_companies_for_address(address_id: UUID) -> list[Company]:
    """Live companies linked to the address through a live link."""

    async def _query(session: AsyncSession) -> list[Company]:
        result = await session.execute(
            select(Company)
            .join(CompanyAddress, CompanyAddress.company_id == Company.id)
            .where(CompanyAddress.address_id == address_id)
            .where(CompanyAddress.active == True)
            .where(Company.active == True)
        )
        return list(result.scalars().all())

    return await store.execute("get_companies_for_address", _query, address_id=address_id)
