"""Company <-> person links (company_person).

Every id is checked before any I/O; a nil UUID raises ValueError. The
primary person of a company (and primary company of a person) is the live
link touched most recently.
"""
import logging
from typing import Optional
from uuid import UUID

from crmdb.models import CompanyPerson
from crmdb.repositories.base import JunctionStore, JunctionTable, require_id
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

store = JunctionStore(JunctionTable(
    CompanyPerson,
    CompanyPerson.company_id,
    CompanyPerson.person_id,
))


async def get_by_company_id(company_id: UUID) -> list[AssociationRow]:
    require_id(company_id, "company_id")
    return await store.get_by_first_id(company_id, operation="get_by_company_id")


async def get_by_person_id(person_id: UUID) -> list[AssociationRow]:
    require_id(person_id, "person_id")
    return await store.get_by_second_id(person_id, operation="get_by_person_id")


async def get_by_company_and_person_id(company_id: UUID, person_id: UUID) -> Optional[AssociationRow]:
    require_id(company_id, "company_id")
    require_id(person_id, "person_id")
    return await store.get_by_composite_id(company_id, person_id, operation="get_by_company_and_person_id")


async def exists_by_company_and_person(company_id: UUID, person_id: UUID) -> bool:
    require_id(company_id, "company_id")
    require_id(person_id, "person_id")
    return await store.exists(company_id, person_id, operation="exists_by_company_and_person")


async def add_relationship(company_id: UUID, person_id: UUID) -> AssociationRow:
    require_id(company_id, "company_id")
    require_id(person_id, "person_id")
    return await store.add_relationship(company_id, person_id)


async def remove_relationship(company_id: UUID, person_id: UUID) -> bool:
    require_id(company_id, "company_id")
    require_id(person_id, "person_id")
    return await store.delete(company_id, person_id, operation="remove_relationship")


async def remove_all_for_company(company_id: UUID) -> int:
    """Detach every person from the company; returns rows affected."""
    require_id(company_id, "company_id")
    return await store.remove_all_by_first_id(company_id, operation="remove_all_for_company")


async def remove_all_for_person(person_id: UUID) -> int:
    require_id(person_id, "person_id")
    return await store.remove_all_by_second_id(person_id, operation="remove_all_for_person")


async def delete_by_company_id(company_id: UUID) -> bool:
    require_id(company_id, "company_id")
    return await store.delete_by_first_id(company_id, operation="delete_by_company_id")


async def delete_by_person_id(person_id: UUID) -> bool:
    require_id(person_id, "person_id")
    return await store.delete_by_second_id(person_id, operation="delete_by_person_id")


async def get_primary_person_for_company(company_id: UUID) -> Optional[AssociationRow]:
    require_id(company_id, "company_id")
    return await store.get_latest_by_first_id(company_id, operation="get_primary_person_for_company")


async def get_primary_company_for_person(person_id: UUID) -> Optional[AssociationRow]:
    require_id(person_id, "person_id")
    return await store.get_latest_by_second_id(person_id, operation="get_primary_company_for_person")
