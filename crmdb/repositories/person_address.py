"""Person <-> address links (person_address).

Audited table: every write also stamps modified_by. The primary address is
the live link touched most recently.
"""
import logging
from typing import Optional
from uuid import UUID

from crmdb.models import Address, PersonAddress
from crmdb.repositories.base import JunctionStore, JunctionTable
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

store = JunctionStore(JunctionTable(
    PersonAddress,
    PersonAddress.person_id,
    PersonAddress.address_id,
))


async def get_by_person_id(person_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id(person_id, operation="get_by_person_id")


async def get_by_address_id(address_id: UUID) -> list[AssociationRow]:
    return await store.get_by_second_id(address_id, operation="get_by_address_id")


async def get_by_person_and_address_id(person_id: UUID, address_id: UUID) -> Optional[AssociationRow]:
    return await store.get_by_composite_id(person_id, address_id, operation="get_by_person_and_address_id")


async def exists_by_person_and_address(person_id: UUID, address_id: UUID) -> bool:
    return await store.exists(person_id, address_id, operation="exists_by_person_and_address")


async def add_relationship(person_id: UUID, address_id: UUID) -> AssociationRow:
    return await store.add_relationship(person_id, address_id)


async def remove_relationship(person_id: UUID, address_id: UUID) -> bool:
    return await store.delete(person_id, address_id, operation="remove_relationship")


async def remove_all_for_person(person_id: UUID) -> int:
    """Soft-delete every live address link of this person; returns rows affected."""
    return await store.remove_all_by_first_id(person_id, operation="remove_all_for_person")


async def remove_all_for_address(address_id: UUID) -> int:
    return await store.remove_all_by_second_id(address_id, operation="remove_all_for_address")


async def delete_by_person_id(person_id: UUID) -> bool:
    return await store.delete_by_first_id(person_id, operation="delete_by_person_id")


async def delete_by_address_id(address_id: UUID) -> bool:
    return await store.delete_by_second_id(address_id, operation="delete_by_address_id")


async def get_by_address_type(person_id: UUID, address_type_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id_joined(
        person_id,
        Address,
        Address.address_type_id == address_type_id,
        operation="get_by_address_type",
        address_type_id=address_type_id,
    )


async def get_primary_address(person_id: UUID) -> Optional[AssociationRow]:
    return await store.get_latest_by_first_id(person_id, operation="get_primary_address")


async def set_primary_address(person_id: UUID, address_id: UUID) -> Optional[AssociationRow]:
    """Refresh the link's modified_date and return it; None if not linked."""
    return await store.touch(person_id, address_id, operation="set_primary_address")


async def update_timestamp(person_id: UUID, address_id: UUID) -> Optional[AssociationRow]:
    return await store.touch(person_id, address_id, operation="update_timestamp")
