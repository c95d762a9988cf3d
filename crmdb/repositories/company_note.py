"""Company <-> note links (company_note), filterable by note type."""
import logging
from typing import Optional
from uuid import UUID

from crmdb.models import CompanyNote, Note
from crmdb.repositories.base import JunctionStore, JunctionTable
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

store = JunctionStore(JunctionTable(
    CompanyNote,
    CompanyNote.company_id,
    CompanyNote.note_id,
))


async def get_by_company_id(company_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id(company_id, operation="get_by_company_id")


async def get_by_note_id(note_id: UUID) -> list[AssociationRow]:
    return await store.get_by_second_id(note_id, operation="get_by_note_id")


async def get_by_company_and_note_id(company_id: UUID, note_id: UUID) -> Optional[AssociationRow]:
    return await store.get_by_composite_id(company_id, note_id, operation="get_by_company_and_note_id")


async def exists_by_company_and_note(company_id: UUID, note_id: UUID) -> bool:
    return await store.exists(company_id, note_id, operation="exists_by_company_and_note")


async def add_relationship(company_id: UUID, note_id: UUID) -> AssociationRow:
    return await store.add_relationship(company_id, note_id)


async def remove_relationship(company_id: UUID, note_id: UUID) -> bool:
    return await store.delete(company_id, note_id, operation="remove_relationship")


async def remove_all_for_company(company_id: UUID) -> int:
    """Soft-delete every live note link of this company; returns rows affected."""
    return await store.remove_all_by_first_id(company_id, operation="remove_all_for_company")


async def remove_all_for_note(note_id: UUID) -> int:
    return await store.remove_all_by_second_id(note_id, operation="remove_all_for_note")


async def delete_by_company_id(company_id: UUID) -> bool:
    return await store.delete_by_first_id(company_id, operation="delete_by_company_id")


async def delete_by_note_id(note_id: UUID) -> bool:
    return await store.delete_by_second_id(note_id, operation="delete_by_note_id")


async def get_by_note_type(company_id: UUID, note_type_id: UUID) -> list[AssociationRow]:
    """Live notes of this company whose note type matches."""
    return await store.get_by_first_id_joined(
        company_id,
        Note,
        Note.note_type_id == note_type_id,
        operation="get_by_note_type",
        note_type_id=note_type_id,
    )
