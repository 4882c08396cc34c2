from sqlalchemy.ext.asyncio import AsyncEngine

from file_store.app.infrastructure.db.base import Base
from file_store.app.infrastructure.db.models import file_record  # noqa: F401  registers the table


async def init_db(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
