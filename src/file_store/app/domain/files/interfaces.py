from __future__ import annotations

from pathlib import Path
from typing import AsyncIterator, Mapping, Protocol, Sequence, runtime_checkable

from file_store.app.domain.files.entities import DeleteOutcome, FilePage, FileRecord, NewFileRecord
from file_store.app.domain.files.value_objects import SortBy


@runtime_checkable
class MetadataCatalog(Protocol):
    async def insert(self, records: Sequence[NewFileRecord]) -> list[FileRecord]:
        """
        All-or-nothing for the batch. Returns full records in input order.
        """
        ...

    async def list(
        self,
        *,
        page: int,
        page_size: int,
        sort_by: SortBy = SortBy.ORIGINAL_NAME,
    ) -> FilePage:
        ...

    async def find_by_storage_name(self, storage_name: str) -> FileRecord:
        ...

    async def delete_by_storage_names(
        self, storage_names: Sequence[str]
    ) -> Mapping[str, DeleteOutcome]:
        ...


@runtime_checkable
class BlobStore(Protocol):
    root: Path

    async def commit(self, staged_path: Path, storage_name: str) -> None:
        ...

    async def exists(self, storage_name: str) -> bool:
        ...

    async def read(self, storage_name: str) -> AsyncIterator[bytes]:
        """
        Raises BlobNotFound up front; the returned iterator streams the bytes.
        """
        ...

    async def delete(self, storage_names: Sequence[str]) -> Mapping[str, DeleteOutcome]:
        ...

    async def discard_staged(self, staged_path: Path) -> None:
        ...
