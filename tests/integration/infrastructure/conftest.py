import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from file_store.app.infrastructure.db import build_engine, build_session_factory, init_db
from file_store.app.infrastructure.files.sql_catalog import SqlAlchemyFileCatalog


@pytest_asyncio.fixture
async def db_engine(tmp_path) -> AsyncEngine:
    # a file database so every session sees the same tables
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine) -> async_sessionmaker[AsyncSession]:
    return build_session_factory(db_engine)


@pytest_asyncio.fixture
async def sql_catalog(session_factory) -> SqlAlchemyFileCatalog:
    return SqlAlchemyFileCatalog(session_factory)
