"""Pytest fixtures for the junction layer tests.

Every database test runs against a fresh in-memory SQLite database. The
crm schema is translated away since SQLite has no schemas.
"""
import pytest
import pytest_asyncio
from sqlalchemy.pool import StaticPool

from crmdb import dispose_engine, get_db, init_engine
from crmdb.models import Base

SQLALCHEMY_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def db():
    """Create all tables on a private in-memory database, drop them afterwards."""
    engine = init_engine(
        SQLALCHEMY_DATABASE_URL,
        poolclass=StaticPool,
        execution_options={"schema_translate_map": {"crm": None}},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield engine
    finally:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        await dispose_engine()


@pytest.fixture
def seed(db):
    """Persist entity rows (companies, notes, ...) in one committed session."""

    async def _seed(*objects):
        async with get_db() as session:
            session.add_all(objects)
        return objects

    return _seed
