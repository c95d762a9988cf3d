"""Person <-> attachment links (person_attachment)."""
import logging
from typing import Optional
from uuid import UUID

from crmdb.models import Attachment, PersonAttachment
from crmdb.repositories.base import JunctionStore, JunctionTable
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

store = JunctionStore(JunctionTable(
    PersonAttachment,
    PersonAttachment.person_id,
    PersonAttachment.attachment_id,
))


async def get_by_person_id(person_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id(person_id, operation="get_by_person_id")


async def get_by_attachment_id(attachment_id: UUID) -> list[AssociationRow]:
    return await store.get_by_second_id(attachment_id, operation="get_by_attachment_id")


async def get_by_person_and_attachment_id(person_id: UUID, attachment_id: UUID) -> Optional[AssociationRow]:
    return await store.get_by_composite_id(person_id, attachment_id, operation="get_by_person_and_attachment_id")


async def exists_by_person_and_attachment(person_id: UUID, attachment_id: UUID) -> bool:
    return await store.exists(person_id, attachment_id, operation="exists_by_person_and_attachment")


async def add_relationship(person_id: UUID, attachment_id: UUID) -> AssociationRow:
    return await store.add_relationship(person_id, attachment_id)


async def remove_relationship(person_id: UUID, attachment_id: UUID) -> bool:
    return await store.delete(person_id, attachment_id, operation="remove_relationship")


async def remove_all_for_person(person_id: UUID) -> int:
    """Soft-delete every live attachment link of this person; returns rows affected."""
    return await store.remove_all_by_first_id(person_id, operation="remove_all_for_person")


async def remove_all_for_attachment(attachment_id: UUID) -> int:
    return await store.remove_all_by_second_id(attachment_id, operation="remove_all_for_attachment")


async def delete_by_person_id(person_id: UUID) -> bool:
    return await store.delete_by_first_id(person_id, operation="delete_by_person_id")


async def delete_by_attachment_id(attachment_id: UUID) -> bool:
    return await store.delete_by_second_id(attachment_id, operation="delete_by_attachment_id")


async def get_by_attachment_type(person_id: UUID, attachment_type_id: UUID) -> list[AssociationRow]:
    """Live attachments of this person with the given attachment type."""
    return await store.get_by_first_id_joined(
        person_id,
        Attachment,
        Attachment.attachment_type_id == attachment_type_id,
        operation="get_by_attachment_type",
        attachment_type_id=attachment_type_id,
    )
