"""Person <-> email address links (person_email_address).

Unlike the other "primary" helpers this one is real: the flag lives on
email_address.is_primary and at most one live address linked to a person
carries it after set_primary_email_address. Ids are validated up front.
"""
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from crmdb.models import EmailAddress, PersonEmailAddress
from crmdb.repositories.base import JunctionStore, JunctionTable, require_id, utcnow
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

store = JunctionStore(JunctionTable(
    PersonEmailAddress,
    PersonEmailAddress.person_id,
    PersonEmailAddress.email_address_id,
))


async def get_by_person_id(person_id: UUID) -> list[AssociationRow]:
    require_id(person_id, "person_id")
    return await store.get_by_first_id(person_id, operation="get_by_person_id")


async def get_by_email_address_id(email_address_id: UUID) -> list[AssociationRow]:
    require_id(email_address_id, "email_address_id")
    return await store.get_by_second_id(email_address_id, operation="get_by_email_address_id")


async def get_by_person_and_email_address_id(
    person_id: UUID, email_address_id: UUID
) -> Optional[AssociationRow]:
    require_id(person_id, "person_id")
    require_id(email_address_id, "email_address_id")
    return await store.get_by_composite_id(
        person_id, email_address_id, operation="get_by_person_and_email_address_id"
    )


async def exists_by_person_and_email_address(person_id: UUID, email_address_id: UUID) -> bool:
    require_id(person_id, "person_id")
    require_id(email_address_id, "email_address_id")
    return await store.exists(person_id, email_address_id, operation="exists_by_person_and_email_address")


async def add_relationship(person_id: UUID, email_address_id: UUID) -> AssociationRow:
    require_id(person_id, "person_id")
    require_id(email_address_id, "email_address_id")
    return await store.add_relationship(person_id, email_address_id)


async def remove_relationship(person_id: UUID, email_address_id: UUID) -> bool:
    require_id(person_id, "person_id")
    require_id(email_address_id, "email_address_id")
    return await store.delete(person_id, email_address_id, operation="remove_relationship")


async def remove_all_for_person(person_id: UUID) -> int:
    require_id(person_id, "person_id")
    return await store.remove_all_by_first_id(person_id, operation="remove_all_for_person")


async def remove_all_for_email_address(email_address_id: UUID) -> int:
    require_id(email_address_id, "email_address_id")
    return await store.remove_all_by_second_id(email_address_id, operation="remove_all_for_email_address")


async def delete_by_person_id(person_id: UUID) -> bool:
    require_id(person_id, "person_id")
    return await store.delete_by_first_id(person_id, operation="delete_by_person_id")


async def delete_by_email_address_id(email_address_id: UUID) -> bool:
    require_id(email_address_id, "email_address_id")
    return await store.delete_by_second_id(email_address_id, operation="delete_by_email_address_id")


async def get_by_email_address_type(person_id: UUID, email_address_type_id: UUID) -> list[AssociationRow]:
    require_id(person_id, "person_id")
    require_id(email_address_type_id, "email_address_type_id")
    return await store.get_by_first_id_joined(
        person_id,
        EmailAddress,
        EmailAddress.email_address_type_id == email_address_type_id,
        operation="get_by_email_address_type",
        email_address_type_id=email_address_type_id,
    )


async def get_primary_email_address_for_person(person_id: UUID) -> Optional[AssociationRow]:
    """The flagged address, else the oldest live one; None if the person has none."""
    require_id(person_id, "person_id")
    stmt = (
        store.joined_rows(EmailAddress)
        .where(PersonEmailAddress.person_id == person_id)
        .order_by(EmailAddress.is_primary.desc(), EmailAddress.created_date.asc())
        .limit(1)
    )
    return await store.fetch_one(stmt, "get_primary_email_address_for_person", person_id=person_id)


async def set_primary_email_address(person_id: UUID, email_address_id: UUID) -> Optional[AssociationRow]:
    """Make email_address_id the person's only primary address.

    Clears is_primary on every live address linked to the person, then sets
    it on the target, in one transaction. Returns the re-read link, or None
    (nothing written) when the person has no live link to the address.
    """
    require_id(person_id, "person_id")
    require_id(email_address_id, "email_address_id")
    stamp = utcnow()
    linked = select(PersonEmailAddress.email_address_id).where(
        PersonEmailAddress.person_id == person_id,
        PersonEmailAddress.active == True,
    )

    async def _query(session: AsyncSession) -> bool:
        result = await session.execute(
            select(func.count())
            .select_from(PersonEmailAddress)
            .where(
                PersonEmailAddress.person_id == person_id,
                PersonEmailAddress.email_address_id == email_address_id,
                PersonEmailAddress.active == True,
            )
        )
        if not result.scalar_one():
            return False
        await session.execute(
            update(EmailAddress)
            .where(EmailAddress.id.in_(linked), EmailAddress.active == True)
            .values(is_primary=False, modified_date=stamp)
            .execution_options(synchronize_session=False)
        )
        await session.execute(
            update(EmailAddress)
            .where(EmailAddress.id == email_address_id, EmailAddress.active == True)
            .values(is_primary=True, modified_date=stamp)
            .execution_options(synchronize_session=False)
        )
        return True

    updated = await store.execute(
        "set_primary_email_address",
        _query,
        person_id=person_id,
        email_address_id=email_address_id,
    )
    if not updated:
        logger.debug("Person %s has no live link to email address %s", person_id, email_address_id)
        return None
    return await store.get_by_composite_id(
        person_id, email_address_id, operation="set_primary_email_address"
    )
