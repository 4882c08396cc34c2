from functools import lru_cache

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from file_store.app.core.config import settings


def build_engine(url: str) -> AsyncEngine:
    return create_async_engine(
        url,
        echo=False,
        pool_pre_ping=True,
    )


@lru_cache
def get_engine() -> AsyncEngine:
    # created on first use so the in-memory backend never needs a DB driver
    return build_engine(settings.SQLALCHEMY_DATABASE_URL)
