"""Person <-> note links (person_note), filterable by note type."""
import logging
from typing import Optional
from uuid import UUID

from crmdb.models import Note, PersonNote
from crmdb.repositories.base import JunctionStore, JunctionTable
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

store = JunctionStore(JunctionTable(
    PersonNote,
    PersonNote.person_id,
    PersonNote.note_id,
))


async def get_by_person_id(person_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id(person_id, operation="get_by_person_id")


async def get_by_note_id(note_id: UUID) -> list[AssociationRow]:
    return await store.get_by_second_id(note_id, operation="get_by_note_id")


async def get_by_person_and_note_id(person_id: UUID, note_id: UUID) -> Optional[AssociationRow]:
    return await store.get_by_composite_id(person_id, note_id, operation="get_by_person_and_note_id")


async def exists_by_person_and_note(person_id: UUID, note_id: UUID) -> bool:
    return await store.exists(person_id, note_id, operation="exists_by_person_and_note")


async def add_relationship(person_id: UUID, note_id: UUID) -> AssociationRow:
    return await store.add_relationship(person_id, note_id)


async def remove_relationship(person_id: UUID, note_id: UUID) -> bool:
    return await store.delete(person_id, note_id, operation="remove_relationship")


async def remove_all_for_person(person_id: UUID) -> int:
    """Soft-delete every live note link of this person; returns rows affected."""
    return await store.remove_all_by_first_id(person_id, operation="remove_all_for_person")


async def remove_all_for_note(note_id: UUID) -> int:
    return await store.remove_all_by_second_id(note_id, operation="remove_all_for_note")


async def delete_by_person_id(person_id: UUID) -> bool:
    return await store.delete_by_first_id(person_id, operation="delete_by_person_id")


async def delete_by_note_id(note_id: UUID) -> bool:
    return await store.delete_by_second_id(note_id, operation="delete_by_note_id")


async def get_by_note_type(person_id: UUID, note_type_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id_joined(
        person_id,
        Note,
        Note.note_type_id == note_type_id,
        operation="get_by_note_type",
        note_type_id=note_type_id,
    )
