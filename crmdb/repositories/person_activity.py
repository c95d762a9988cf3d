"""Person <-> activity links (person_activity)."""
import logging
from typing import Optional
from uuid import UUID

from crmdb.models import PersonActivity
from crmdb.repositories.base import JunctionStore, JunctionTable
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

store = JunctionStore(JunctionTable(
    PersonActivity,
    PersonActivity.person_id,
    PersonActivity.activity_id,
))


async def get_by_person_id(person_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id(person_id, operation="get_by_person_id")


async def get_by_activity_id(activity_id: UUID) -> list[AssociationRow]:
    return await store.get_by_second_id(activity_id, operation="get_by_activity_id")


async def get_by_person_and_activity_id(person_id: UUID, activity_id: UUID) -> Optional[AssociationRow]:
    return await store.get_by_composite_id(person_id, activity_id, operation="get_by_person_and_activity_id")


async def exists_by_person_and_activity(person_id: UUID, activity_id: UUID) -> bool:
    return await store.exists(person_id, activity_id, operation="exists_by_person_and_activity")


async def add_relationship(person_id: UUID, activity_id: UUID) -> AssociationRow:
    return await store.add_relationship(person_id, activity_id)


async def remove_relationship(person_id: UUID, activity_id: UUID) -> bool:
    return await store.delete(person_id, activity_id, operation="remove_relationship")


async def remove_all_for_person(person_id: UUID) -> int:
    return await store.remove_all_by_first_id(person_id, operation="remove_all_for_person")


async def remove_all_for_activity(activity_id: UUID) -> int:
    return await store.remove_all_by_second_id(activity_id, operation="remove_all_for_activity")


async def delete_by_person_id(person_id: UUID) -> bool:
    return await store.delete_by_first_id(person_id, operation="delete_by_person_id")


async def delete_by_activity_id(activity_id: UUID) -> bool:
    return await store.delete_by_second_id(activity_id, operation="delete_by_activity_id")
