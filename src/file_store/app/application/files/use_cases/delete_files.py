from __future__ import annotations

import asyncio
import logging

from file_store.app.application.files.dto import DeleteFilesInputDTO
from file_store.app.application.files.mappers import merge_deletion_outcomes
from file_store.app.application.files.timeouts import bounded
from file_store.app.domain.files.entities import DeletionResult
from file_store.app.domain.files.errors import BlobIOFailure, CatalogStorageFailure, DeletionFailure
from file_store.app.domain.files.interfaces import BlobStore, MetadataCatalog

logger = logging.getLogger(__name__)


class DeleteFilesUseCase:
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

    async def execute(self, dto: DeleteFilesInputDTO) -> list[DeletionResult]:
        names = list(dict.fromkeys(dto.storage_names))
        if not names:
            return []
        logger.info("Deleting %d files (requested by %s)", len(names), dto.requested_by)

        # catalog and blob store are independent; hit both at once
        catalog_result, blob_result = await asyncio.gather(
            bounded(
                self._catalog.delete_by_storage_names(names),
                timeout_s=self._timeout_s,
                error=CatalogStorageFailure("Catalog delete timed out"),
            ),
            bounded(
                self._blob_store.delete(names),
                timeout_s=self._timeout_s,
                error=BlobIOFailure(", ".join(names), "delete timed out"),
            ),
            return_exceptions=True,
        )

        for res in (catalog_result, blob_result):
            if isinstance(res, BaseException):
                logger.error("Error Deleting File: %s", res)
                raise DeletionFailure(str(res)) from res

        results = merge_deletion_outcomes(names, catalog_result, blob_result)
        for result in results:
            if result.errors:
                logger.warning("Deleting %s reported: %s", result.storage_name, "; ".join(result.errors))
        return results
