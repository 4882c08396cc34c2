from __future__ import annotations

from file_store.app.application.files.dto import ListFilesInputDTO
from file_store.app.application.files.timeouts import bounded
from file_store.app.domain.files.entities import FilePage
from file_store.app.domain.files.errors import CatalogStorageFailure
from file_store.app.domain.files.interfaces import MetadataCatalog


class ListFilesUseCase:
    def __init__(self, catalog: MetadataCatalog, *, timeout_s: float = 30.0) -> None:
        self._catalog = catalog
        self._timeout_s = timeout_s

    async def execute(self, dto: ListFilesInputDTO) -> FilePage:
        return await bounded(
            self._catalog.list(page=dto.page, page_size=dto.page_size, sort_by=dto.sort_by),
            timeout_s=self._timeout_s,
            error=CatalogStorageFailure("Catalog listing timed out"),
        )
