from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from file_store.app.application.files.dto import UploadFilesInputDTO
from file_store.app.application.files.mappers import payload_to_new_record, validate_payload
from file_store.app.application.files.timeouts import bounded
from file_store.app.domain.files.entities import FileRecord, NewFileRecord, UploadedPayload
from file_store.app.domain.files.errors import BlobIOFailure, CatalogStorageFailure, UploadFailure, ValidationFailure
from file_store.app.domain.files.interfaces import BlobStore, MetadataCatalog

logger = logging.getLogger(__name__)


class UploadFilesUseCase:
    """
    Moves staged uploads into the blob store, then records them in the catalog.

    Either every file of the batch ends up with a blob and a record, or the
    blobs written so far and the staged files are removed and UploadFailure
    is raised with the first underlying error as its cause.
    """

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

    async def execute(self, dto: UploadFilesInputDTO) -> list[FileRecord]:
        if not dto.payloads:
            return []

        # validate the whole batch before touching storage
        try:
            for payload in dto.payloads:
                validate_payload(payload)
        except ValidationFailure:
            await self._discard_staged(dto.payloads)
            raise

        new_records = [
            payload_to_new_record(p, owner_id=dto.owner_id, is_private=dto.options.is_private)
            for p in dto.payloads
        ]
        logger.info("Uploading %d files for %s", len(new_records), dto.owner_id)

        # 1) Commit every blob concurrently
        results = await asyncio.gather(
            *(self._commit(p, r) for p, r in zip(dto.payloads, new_records)),
            return_exceptions=True,
        )
        committed = [
            r.storage_name
            for r, res in zip(new_records, results)
            if not isinstance(res, BaseException)
        ]
        failures = [res for res in results if isinstance(res, BaseException)]
        if failures:
            cause = failures[0]
            logger.error("Error uploading files: %s", cause)
            await self._roll_back(committed, dto.payloads)
            raise UploadFailure(cause) from cause

        # 2) Only then record the batch
        try:
            return await bounded(
                self._catalog.insert(new_records),
                timeout_s=self._timeout_s,
                error=CatalogStorageFailure("Catalog insert timed out"),
            )
        except Exception as e:
            logger.error("Error uploading files: %s", e)
            await self._roll_back(committed, dto.payloads)
            raise UploadFailure(e) from e

    async def _commit(self, payload: UploadedPayload, record: NewFileRecord) -> None:
        await bounded(
            self._blob_store.commit(payload.staged_path, record.storage_name),
            timeout_s=self._timeout_s,
            error=BlobIOFailure(record.storage_name, "commit timed out"),
        )

    async def _roll_back(self, storage_names: Sequence[str], payloads: Sequence[UploadedPayload]) -> None:
        """
        Best effort: failures are logged, never raised.
        """
        if storage_names:
            try:
                outcomes = await bounded(
                    self._blob_store.delete(storage_names),
                    timeout_s=self._timeout_s,
                    error=BlobIOFailure(", ".join(storage_names), "rollback timed out"),
                )
            except Exception as e:
                logger.error("Unable to roll back writes: %s", e)
            else:
                for name, outcome in outcomes.items():
                    if not outcome.ok:
                        logger.error("Unable to roll back write of %s: %s", name, outcome.error)

        await self._discard_staged(payloads)

    async def _discard_staged(self, payloads: Sequence[UploadedPayload]) -> None:
        discarded = await asyncio.gather(
            *(self._blob_store.discard_staged(p.staged_path) for p in payloads),
            return_exceptions=True,
        )
        for payload, res in zip(payloads, discarded):
            if isinstance(res, BaseException):
                logger.error("Unable to remove staged file %s: %s", payload.staged_path, res)
