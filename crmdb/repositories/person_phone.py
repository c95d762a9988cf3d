"""Person <-> phone links (person_phone). The primary phone is the most recently touched live link."""
import logging
from typing import Optional
from uuid import UUID

from crmdb.models import PersonPhone, Phone
from crmdb.repositories.base import JunctionStore, JunctionTable
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

store = JunctionStore(JunctionTable(
    PersonPhone,
    PersonPhone.person_id,
    PersonPhone.phone_id,
))


async def get_by_person_id(person_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id(person_id, operation="get_by_person_id")


async def get_by_phone_id(phone_id: UUID) -> list[AssociationRow]:
    return await store.get_by_second_id(phone_id, operation="get_by_phone_id")


async def get_by_person_and_phone_id(person_id: UUID, phone_id: UUID) -> Optional[AssociationRow]:
    return await store.get_by_composite_id(person_id, phone_id, operation="get_by_person_and_phone_id")


async def exists_by_person_and_phone(person_id: UUID, phone_id: UUID) -> bool:
    return await store.exists(person_id, phone_id, operation="exists_by_person_and_phone")


async def add_relationship(person_id: UUID, phone_id: UUID) -> AssociationRow:
    return await store.add_relationship(person_id, phone_id)


async def remove_relationship(person_id: UUID, phone_id: UUID) -> bool:
    return await store.delete(person_id, phone_id, operation="remove_relationship")


async def remove_all_for_person(person_id: UUID) -> int:
    """Soft-delete every live phone link of this person; returns rows affected."""
    return await store.remove_all_by_first_id(person_id, operation="remove_all_for_person")


async def remove_all_for_phone(phone_id: UUID) -> int:
    return await store.remove_all_by_second_id(phone_id, operation="remove_all_for_phone")


async def delete_by_person_id(person_id: UUID) -> bool:
    return await store.delete_by_first_id(person_id, operation="delete_by_person_id")


async def delete_by_phone_id(phone_id: UUID) -> bool:
    return await store.delete_by_second_id(phone_id, operation="delete_by_phone_id")


async def get_by_phone_type(person_id: UUID, phone_type_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id_joined(
        person_id,
        Phone,
        Phone.phone_type_id == phone_type_id,
        operation="get_by_phone_type",
        phone_type_id=phone_type_id,
    )


async def get_primary_phone(person_id: UUID) -> Optional[AssociationRow]:
    return await store.get_latest_by_first_id(person_id, operation="get_primary_phone")


async def set_primary_phone(person_id: UUID, phone_id: UUID) -> Optional[AssociationRow]:
    return await store.touch(person_id, phone_id, operation="set_primary_phone")
