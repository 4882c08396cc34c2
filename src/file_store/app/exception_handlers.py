import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from file_store.app.domain.files.errors import (
    BlobIOFailure,
    CatalogStorageFailure,
    DeletionFailure,
    FileNotFound,
    FileUnavailable,
    UploadFailure,
    ValidationFailure,
)

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationFailure)
    async def validation_failure(_: Request, exc: ValidationFailure):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc) or "Invalid Input"},
        )

    @app.exception_handler(FileNotFound)
    async def file_not_found(_: Request, __: FileNotFound):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": "File not found"},
        )

    @app.exception_handler(FileUnavailable)
    async def file_unavailable(_: Request, __: FileUnavailable):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": "File not available"},
        )

    @app.exception_handler(UploadFailure)
    async def upload_failure(_: Request, exc: UploadFailure):
        logger.error("Upload failed: %s", exc.cause)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Error Uploading Files"},
        )

    @app.exception_handler(DeletionFailure)
    async def deletion_failure(_: Request, exc: DeletionFailure):
        logger.error("Deletion failed: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Error Deleting Files"},
        )

    @app.exception_handler(CatalogStorageFailure)
    async def catalog_failure(_: Request, exc: CatalogStorageFailure):
        logger.error("Catalog failure: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "File catalog unavailable"},
        )

    @app.exception_handler(BlobIOFailure)
    async def blob_failure(_: Request, exc: BlobIOFailure):
        logger.error("Blob store failure: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "File storage unavailable"},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception(_: Request, exc: Exception):
        logger.exception("Unhandled exception", exc_info=exc)

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "Internal server error"
            },
        )
