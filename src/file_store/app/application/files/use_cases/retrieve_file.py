from __future__ import annotations

import asyncio
import logging
from typing import NoReturn

from file_store.app.application.files.dto import RetrieveFileInputDTO
from file_store.app.application.files.timeouts import bounded
from file_store.app.domain.files.access import can_retrieve
from file_store.app.domain.files.entities import RetrievedFile
from file_store.app.domain.files.errors import (
    BlobIOFailure,
    BlobNotFound,
    CatalogStorageFailure,
    FileNotFound,
    FileUnavailable,
)
from file_store.app.domain.files.interfaces import BlobStore, MetadataCatalog

logger = logging.getLogger(__name__)


def _deny(authenticated: bool, error: FileNotFound) -> NoReturn:
    # anonymous callers must not learn whether the file exists
    if authenticated:
        raise error
    raise FileUnavailable() from error


class RetrieveFileUseCase:
    def __init__(
        self,
        catalog: MetadataCatalog,
        blob_store: BlobStore,
        *,
        timeout_s: float = 30.0,
    ) -> None:
        self._catalog = catalog
        self._blob_store = blob_store
        self._timeout_s = timeout_s

    async def execute(self, dto: RetrieveFileInputDTO) -> RetrievedFile:
        name = dto.storage_name
        authenticated = dto.auth.authenticated

        record, blob_exists = await asyncio.gather(
            bounded(
                self._catalog.find_by_storage_name(name),
                timeout_s=self._timeout_s,
                error=CatalogStorageFailure(f"Catalog lookup of {name} timed out"),
            ),
            bounded(
                self._blob_store.exists(name),
                timeout_s=self._timeout_s,
                error=BlobIOFailure(name, "existence check timed out"),
            ),
            return_exceptions=True,
        )

        if isinstance(record, FileNotFound):
            _deny(authenticated, record)
        if isinstance(record, BaseException):
            raise record

        # deny before any blob-store error can tell a private file apart from a missing one
        if not can_retrieve(is_private=record.is_private, authenticated=authenticated):
            raise FileUnavailable()

        if isinstance(blob_exists, BaseException):
            raise blob_exists

        if not blob_exists:
            logger.warning("Catalog record %s has no blob", name)
            _deny(authenticated, BlobNotFound(name))

        try:
            chunks = await bounded(
                self._blob_store.read(name),
                timeout_s=self._timeout_s,
                error=BlobIOFailure(name, "read timed out"),
            )
        except BlobNotFound as e:
            _deny(authenticated, e)

        return RetrievedFile(record=record, chunks=chunks)
