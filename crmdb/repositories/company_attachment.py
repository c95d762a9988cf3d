"""Company <-> attachment links (company_attachment).

Audited table: every write also stamps modified_by.
"""
import logging
from typing import Optional
from uuid import UUID

from crmdb.models import Attachment, CompanyAttachment
from crmdb.repositories.base import JunctionStore, JunctionTable
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

store = JunctionStore(JunctionTable(
    CompanyAttachment,
    CompanyAttachment.company_id,
    CompanyAttachment.attachment_id,
))


async def get_by_company_id(company_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id(company_id, operation="get_by_company_id")


async def get_by_attachment_id(attachment_id: UUID) -> list[AssociationRow]:
    return await store.get_by_second_id(attachment_id, operation="get_by_attachment_id")


async def get_by_company_and_attachment_id(company_id: UUID, attachment_id: UUID) -> Optional[AssociationRow]:
    return await store.get_by_composite_id(company_id, attachment_id, operation="get_by_company_and_attachment_id")


async def exists_by_company_and_attachment(company_id: UUID, attachment_id: UUID) -> bool:
    return await store.exists(company_id, attachment_id, operation="exists_by_company_and_attachment")


async def add_relationship(company_id: UUID, attachment_id: UUID) -> AssociationRow:
    return await store.add_relationship(company_id, attachment_id)


async def remove_relationship(company_id: UUID, attachment_id: UUID) -> bool:
    return await store.delete(company_id, attachment_id, operation="remove_relationship")


async def remove_all_for_company(company_id: UUID) -> int:
    """Soft-delete every live attachment link of this company; returns rows affected."""
    return await store.remove_all_by_first_id(company_id, operation="remove_all_for_company")


async def remove_all_for_attachment(attachment_id: UUID) -> int:
    return await store.remove_all_by_second_id(attachment_id, operation="remove_all_for_attachment")


async def delete_by_company_id(company_id: UUID) -> bool:
    return await store.delete_by_first_id(company_id, operation="delete_by_company_id")


async def delete_by_attachment_id(attachment_id: UUID) -> bool:
    return await store.delete_by_second_id(attachment_id, operation="delete_by_attachment_id")


async def get_by_attachment_type(company_id: UUID, attachment_type_id: UUID) -> list[AssociationRow]:
    return await store.get_by_first_id_joined(
        company_id,
        Attachment,
        Attachment.attachment_type_id == attachment_type_id,
        operation="get_by_attachment_type",
        attachment_type_id=attachment_type_id,
    )
