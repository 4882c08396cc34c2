from __future__ import annotations

from typing import Sequence

from file_store.app.domain.files.entities import DeleteOutcome, FileRecord, NewFileRecord
from file_store.app.domain.files.errors import CatalogStorageFailure
from file_store.app.infrastructure.files.memory_catalog import InMemoryFileCatalog


class FailingInsertCatalog(InMemoryFileCatalog):
    """Catalog whose batch insert always fails, as if the database went away."""

    async def insert(self, records: Sequence[NewFileRecord]) -> list[FileRecord]:
        raise CatalogStorageFailure("connection lost")


class UnreachableCatalog(InMemoryFileCatalog):
    async def find_by_storage_name(self, storage_name: str) -> FileRecord:
        raise CatalogStorageFailure("connection lost")

    async def delete_by_storage_names(self, storage_names: Sequence[str]) -> dict[str, DeleteOutcome]:
        raise CatalogStorageFailure("connection lost")
