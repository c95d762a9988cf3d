"""Composite-key junction store shared by every association repository.

A junction table is described by a JunctionTable record: the ORM model, the
two id columns forming its composite primary key, and whether adds should
reactivate an existing pair instead of inserting. JunctionStore runs the
generic CRUD against that record:

- reads project first_id / second_id / active / modified_date and return
  AssociationRow values; only active rows unless stated otherwise
- deletes are soft: active = false plus a fresh modified_date
- each call opens its own session through the session factory and runs
  inside execute(), which logs start / success / failure and re-raises
"""
import asyncio
import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, AsyncContextManager, Awaitable, Callable, Optional, TypeVar
from uuid import UUID

from sqlalchemy import Select, func, insert, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from crmdb.connection import get_db
from schemas.association import AssociationRow

logger = logging.getLogger(__name__)

T = TypeVar("T")

SessionFactory = Callable[[], AsyncContextManager[AsyncSession]]

NIL_UUID = UUID(int=0)

DEFAULT_AUDIT_USER = "SYSTEM"


def audit_user() -> str:
    """Value stamped into modified_by; CRM_AUDIT_USER is read on every write."""
    return os.environ.get("CRM_AUDIT_USER", DEFAULT_AUDIT_USER)


def require_id(value: Optional[UUID], name: str) -> UUID:
    """Reject a missing or nil identifier before any I/O."""
    if value is None or value == NIL_UUID:
        raise ValueError(f"{name} must be a non-empty identifier")
    return value


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class JunctionTable:
    """Binds the generic store to one physical junction table."""

    model: type
    first: InstrumentedAttribute
    second: InstrumentedAttribute
    upsert_on_add: bool = False

    @property
    def name(self) -> str:
        return self.model.__tablename__

    @property
    def audited(self) -> bool:
        return "modified_by" in self.model.__table__.c

    @property
    def columns(self) -> tuple:
        return (
            self.first.label("first_id"),
            self.second.label("second_id"),
            self.model.active.label("active"),
            self.model.modified_date.label("modified_date"),
        )


def _to_row(mapping) -> AssociationRow:
    return AssociationRow(
        first_id=mapping["first_id"],
        second_id=mapping["second_id"],
        active=mapping["active"],
        modified_date=mapping["modified_date"],
    )


class JunctionStore:
    """Generic composite-key CRUD with soft-delete semantics.

    Stateless apart from its table configuration, so one instance per table
    is shared by all callers. No call shares a session or transaction with
    another; multi-step helpers (touch) are separate round trips.
    """

    def __init__(
        self,
        table: JunctionTable,
        session_factory: Optional[SessionFactory] = None,
        name: Optional[str] = None,
    ):
        self.table = table
        self._session_factory = session_factory or get_db
        self.name = name or f"{table.model.__name__}Repository"

    # ------------------------------------------------------------------
    # Resilience / logging wrapper
    # ------------------------------------------------------------------

    async def execute(
        self,
        operation: str,
        query: Callable[[AsyncSession], Awaitable[T]],
        **details: Any,
    ) -> T:
        """Run query against a fresh session.

        Failures (cancellation included) are logged with the operation name,
        this store's name and the diagnostic details, then re-raised as-is.
        """
        logger.debug("Executing %s operation in %s", operation, self.name)
        try:
            async with self._session_factory() as session:
                result = await query(session)
        except (Exception, asyncio.CancelledError):
            context = {"entity_type": self.table.model.__name__, **details}
            logger.exception(
                "Error during %s in %s. %s",
                operation,
                self.name,
                context,
                extra={"operation": operation, "repository": self.name, "details": context},
            )
            raise
        logger.debug("Successfully executed %s operation in %s", operation, self.name)
        return result

    # ------------------------------------------------------------------
    # Statement helpers
    # ------------------------------------------------------------------

    def live(self):
        return self.table.model.active == True

    def _key(self, first_id: UUID, second_id: UUID) -> tuple:
        return (self.table.first == first_id, self.table.second == second_id)

    def _stamp(self) -> dict[str, Any]:
        values: dict[str, Any] = {"modified_date": utcnow()}
        if self.table.audited:
            values["modified_by"] = audit_user()
        return values

    def select_rows(self) -> Select:
        return select(*self.table.columns)

    def joined_rows(self, related: type) -> Select:
        """Live rows joined to the live side entity behind second_id."""
        return (
            self.select_rows()
            .join_from(self.table.model, related, self.table.second == related.id)
            .where(self.live())
            .where(related.active == True)
        )

    async def fetch_all(self, stmt: Select, operation: str, **details: Any) -> list[AssociationRow]:
        async def _query(session: AsyncSession) -> list[AssociationRow]:
            result = await session.execute(stmt)
            return [_to_row(m) for m in result.mappings().all()]

        return await self.execute(operation, _query, **details)

    async def fetch_one(self, stmt: Select, operation: str, **details: Any) -> Optional[AssociationRow]:
        async def _query(session: AsyncSession) -> Optional[AssociationRow]:
            result = await session.execute(stmt)
            mapping = result.mappings().first()
            return _to_row(mapping) if mapping is not None else None

        return await self.execute(operation, _query, **details)

    async def _rowcount(self, stmt, operation: str, **details: Any) -> int:
        async def _query(session: AsyncSession) -> int:
            result = await session.execute(stmt)
            return result.rowcount

        return await self.execute(operation, _query, **details)

    async def _deactivate(self, criteria: tuple, operation: str, **details: Any) -> int:
        stmt = (
            update(self.table.model)
            .where(*criteria)
            .where(self.live())
            .values(active=False, **self._stamp())
            .execution_options(synchronize_session=False)
        )
        return await self._rowcount(stmt, operation, **details)

    async def _write(self, first_id: UUID, second_id: UUID, active: bool, operation: str) -> datetime:
        """Insert one row (or insert-or-reactivate) and return the modified_date written."""
        stamp = self._stamp()
        first_key, second_key = self.table.first.key, self.table.second.key
        values = {first_key: first_id, second_key: second_id, "active": active, **stamp}
        model = self.table.model
        upsert = self.table.upsert_on_add

        async def _query(session: AsyncSession) -> None:
            if not upsert:
                await session.execute(insert(model).values(**values))
                return
            dialect_insert = sqlite_insert if session.bind.dialect.name == "sqlite" else pg_insert
            stmt = (
                dialect_insert(model)
                .values(**{**values, "active": True})
                .on_conflict_do_update(
                    index_elements=[first_key, second_key],
                    set_={"active": True, **stamp},
                )
            )
            await session.execute(stmt)

        await self.execute(operation, _query, first_id=first_id, second_id=second_id)
        return stamp["modified_date"]

    # ------------------------------------------------------------------
    # Generic contract
    # ------------------------------------------------------------------

    async def add(self, row: AssociationRow, operation: str = "add") -> AssociationRow:
        """Insert row.

        Plain tables do a bare insert and hand back the input row; a second
        insert of the same pair fails on the primary key. Tables configured
        with upsert_on_add reactivate the existing pair in the same statement
        and return the row as written (active, with its new modified_date).
        """
        if row is None:
            raise ValueError("row must not be None")
        written = await self._write(row.first_id, row.second_id, row.active, operation)
        if self.table.upsert_on_add:
            return row.model_copy(update={"active": True, "modified_date": written})
        return row

    async def add_relationship(
        self, first_id: UUID, second_id: UUID, operation: str = "add_relationship"
    ) -> AssociationRow:
        written = await self._write(first_id, second_id, True, operation)
        return AssociationRow(
            first_id=first_id, second_id=second_id, active=True, modified_date=written
        )

    async def update(self, row: AssociationRow, operation: str = "update") -> AssociationRow:
        """Write row.active and a fresh modified_date; returns the input row."""
        if row is None:
            raise ValueError("row must not be None")
        stmt = (
            update(self.table.model)
            .where(*self._key(row.first_id, row.second_id))
            .values(active=row.active, **self._stamp())
            .execution_options(synchronize_session=False)
        )
        await self._rowcount(stmt, operation, first_id=row.first_id, second_id=row.second_id)
        return row

    async def get_by_composite_id(
        self, first_id: UUID, second_id: UUID, operation: str = "get_by_composite_id"
    ) -> Optional[AssociationRow]:
        stmt = self.select_rows().where(*self._key(first_id, second_id)).where(self.live())
        return await self.fetch_one(stmt, operation, first_id=first_id, second_id=second_id)

    async def get_by_first_id(
        self, first_id: UUID, operation: str = "get_by_first_id"
    ) -> list[AssociationRow]:
        stmt = self.select_rows().where(self.table.first == first_id).where(self.live())
        return await self.fetch_all(stmt, operation, first_id=first_id)

    async def get_by_second_id(
        self, second_id: UUID, operation: str = "get_by_second_id"
    ) -> list[AssociationRow]:
        stmt = self.select_rows().where(self.table.second == second_id).where(self.live())
        return await self.fetch_all(stmt, operation, second_id=second_id)

    async def get_all(self, operation: str = "get_all") -> list[AssociationRow]:
        """Every live row. Unpaginated; only sensible for small tables."""
        return await self.fetch_all(self.select_rows().where(self.live()), operation)

    async def exists(self, first_id: UUID, second_id: UUID, operation: str = "exists") -> bool:
        stmt = (
            select(func.count())
            .select_from(self.table.model)
            .where(*self._key(first_id, second_id))
            .where(self.live())
        )

        async def _query(session: AsyncSession) -> bool:
            result = await session.execute(stmt)
            return result.scalar_one() > 0

        return await self.execute(operation, _query, first_id=first_id, second_id=second_id)

    async def delete(self, first_id: UUID, second_id: UUID, operation: str = "delete") -> bool:
        """Soft-delete one live row. False when nothing live matched."""
        affected = await self._deactivate(
            self._key(first_id, second_id), operation, first_id=first_id, second_id=second_id
        )
        return affected > 0

    async def delete_by_first_id(self, first_id: UUID, operation: str = "delete_by_first_id") -> bool:
        return await self.remove_all_by_first_id(first_id, operation=operation) > 0

    async def delete_by_second_id(self, second_id: UUID, operation: str = "delete_by_second_id") -> bool:
        return await self.remove_all_by_second_id(second_id, operation=operation) > 0

    async def remove_all_by_first_id(
        self, first_id: UUID, operation: str = "remove_all_by_first_id"
    ) -> int:
        """Soft-delete every live row on the first side; returns rows affected."""
        return await self._deactivate(
            (self.table.first == first_id,), operation, first_id=first_id
        )

    async def remove_all_by_second_id(
        self, second_id: UUID, operation: str = "remove_all_by_second_id"
    ) -> int:
        return await self._deactivate(
            (self.table.second == second_id,), operation, second_id=second_id
        )

    # ------------------------------------------------------------------
    # Helpers used by several association types
    # ------------------------------------------------------------------

    async def refresh(self, first_id: UUID, second_id: UUID, operation: str = "refresh") -> bool:
        """Bump modified_date on a live row. False when no live row matched."""
        stmt = (
            update(self.table.model)
            .where(*self._key(first_id, second_id))
            .where(self.live())
            .values(**self._stamp())
            .execution_options(synchronize_session=False)
        )
        touched = await self._rowcount(stmt, operation, first_id=first_id, second_id=second_id)
        return touched > 0

    async def touch(
        self, first_id: UUID, second_id: UUID, operation: str = "touch"
    ) -> Optional[AssociationRow]:
        """refresh() then read the row back (two round trips)."""
        if not await self.refresh(first_id, second_id, operation=operation):
            return None
        return await self.get_by_composite_id(first_id, second_id, operation=operation)

    async def get_latest_by_first_id(
        self, first_id: UUID, operation: str = "get_latest_by_first_id"
    ) -> Optional[AssociationRow]:
        """The live row on this side with the newest modified_date."""
        stmt = (
            self.select_rows()
            .where(self.table.first == first_id)
            .where(self.live())
            .order_by(self.table.model.modified_date.desc())
            .limit(1)
        )
        return await self.fetch_one(stmt, operation, first_id=first_id)

    async def get_latest_by_second_id(
        self, second_id: UUID, operation: str = "get_latest_by_second_id"
    ) -> Optional[AssociationRow]:
        stmt = (
            self.select_rows()
            .where(self.table.second == second_id)
            .where(self.live())
            .order_by(self.table.model.modified_date.desc())
            .limit(1)
        )
        return await self.fetch_one(stmt, operation, second_id=second_id)

    async def get_by_first_id_joined(
        self, first_id: UUID, related: type, *criteria, operation: str, **details: Any
    ) -> list[AssociationRow]:
        """Live rows for first_id whose live side entity matches criteria."""
        stmt = self.joined_rows(related).where(self.table.first == first_id)
        if criteria:
            stmt = stmt.where(*criteria)
        return await self.fetch_all(stmt, operation, first_id=first_id, **details)

    async def get_removed(
        self,
        first_id: Optional[UUID] = None,
        second_id: Optional[UUID] = None,
        operation: str = "get_removed",
    ) -> list[AssociationRow]:
        """Diagnostic read of soft-deleted rows, optionally narrowed to one side."""
        stmt = self.select_rows().where(self.table.model.active == False)
        if first_id is not None:
            stmt = stmt.where(self.table.first == first_id)
        if second_id is not None:
            stmt = stmt.where(self.table.second == second_id)
        return await self.fetch_all(stmt, operation, first_id=first_id, second_id=second_id)
