from contextlib import asynccontextmanager

from fastapi import FastAPI

from file_store.app.api.v1.router import api_router
from file_store.app.core.config import settings
from file_store.app.core.logging import configure_logging
from file_store.app.core.startup import prepare_storage_dirs
from file_store.app.exception_handlers import register_exception_handlers
from file_store.app.infrastructure.db import get_engine, init_db


def create_app():
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.LOG_LEVEL)
        # raises StorageRootUnavailable, which aborts startup
        prepare_storage_dirs(settings)
        if settings.METADATA_BACKEND == "sql":
            await init_db(get_engine())
        yield
        if settings.METADATA_BACKEND == "sql":
            await get_engine().dispose()

    app = FastAPI(title="File Store API", lifespan=lifespan)
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health")
    def health():
        return {"status": "ok"}

    register_exception_handlers(app)
    return app


app = create_app()
