from __future__ import annotations

import asyncio
from typing import Sequence

from file_store.app.domain.files.entities import DeleteOutcome, FilePage, FileRecord, NewFileRecord
from file_store.app.domain.files.errors import (
    MISSING_RECORD_ERROR,
    CatalogStorageFailure,
    RecordNotFound,
    ValidationFailure,
)
from file_store.app.domain.files.value_objects import SortBy


def sort_key(sort_by: SortBy):
    if sort_by == SortBy.DATE_ADDED:
        return lambda r: (r.date_added, r.storage_name)
    return lambda r: (r.original_filename, r.date_added, r.storage_name)


def paginate(records: list[FileRecord], *, page: int, page_size: int) -> FilePage:
    if page_size < 1:
        raise ValidationFailure("page_size must be at least 1")
    if page < 1:
        return FilePage(records=[], has_more=False)

    start = (page - 1) * page_size
    end = start + page_size
    if start >= len(records):
        return FilePage(records=[], has_more=False)
    return FilePage(records=records[start:end], has_more=end < len(records))


class InMemoryFileCatalog:
    """
    Process-local catalog keyed by storage name.
    All mutation happens under a single lock.
    """

    def __init__(self) -> None:
        self._records: dict[str, FileRecord] = {}
        self._lock = asyncio.Lock()

    async def insert(self, records: Sequence[NewFileRecord]) -> list[FileRecord]:
        async with self._lock:
            names = [r.storage_name for r in records]
            if len(set(names)) != len(names):
                raise CatalogStorageFailure("Duplicate storage names in batch")
            taken = [n for n in names if n in self._records]
            if taken:
                raise CatalogStorageFailure(f"Storage names already in use: {', '.join(taken)}")

            saved = [r.to_record() for r in records]
            for record in saved:
                self._records[record.storage_name] = record
            return saved

    async def list(
        self,
        *,
        page: int,
        page_size: int,
        sort_by: SortBy = SortBy.ORIGINAL_NAME,
    ) -> FilePage:
        async with self._lock:
            ordered = sorted(self._records.values(), key=sort_key(sort_by))
        return paginate(ordered, page=page, page_size=page_size)

    async def find_by_storage_name(self, storage_name: str) -> FileRecord:
        async with self._lock:
            record = self._records.get(storage_name)
        if record is None:
            raise RecordNotFound(storage_name)
        return record

    async def delete_by_storage_names(self, storage_names: Sequence[str]) -> dict[str, DeleteOutcome]:
        outcomes: dict[str, DeleteOutcome] = {}
        async with self._lock:
            for name in storage_names:
                record = self._records.pop(name, None)
                if record is None:
                    outcomes[name] = DeleteOutcome(error=MISSING_RECORD_ERROR)
                else:
                    outcomes[name] = DeleteOutcome(record=record)
        return outcomes

    # ---------- helpers ----------

    def count(self) -> int:
        return len(self._records)
