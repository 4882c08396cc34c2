from __future__ import annotations

import logging
from typing import Sequence

from sqlalchemy import delete as sa_delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from file_store.app.domain.files.entities import DeleteOutcome, FilePage, FileRecord, NewFileRecord
from file_store.app.domain.files.errors import (
    MISSING_RECORD_ERROR,
    CatalogStorageFailure,
    RecordNotFound,
    ValidationFailure,
)
from file_store.app.domain.files.value_objects import SortBy
from file_store.app.infrastructure.db.models.file_record import FileRecordModel
from file_store.app.infrastructure.files.mappers import file_record_model_to_domain, new_file_record_to_model

logger = logging.getLogger(__name__)


def _order_by(sort_by: SortBy, dialect_name: str = "sqlite"):
    if sort_by == SortBy.DATE_ADDED:
        return (FileRecordModel.date_added.asc(), FileRecordModel.storage_name.asc())
    original_filename = FileRecordModel.original_filename
    if dialect_name == "postgresql":
        # codepoint order, same as the in-memory catalog
        original_filename = original_filename.collate("C")
    return (
        original_filename.asc(),
        FileRecordModel.date_added.asc(),
        FileRecordModel.storage_name.asc(),
    )


class SqlAlchemyFileCatalog:
    """
    Catalog backed by a relational database. Each call runs in its own
    transaction; concurrency control is left to the database.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def insert(self, records: Sequence[NewFileRecord]) -> list[FileRecord]:
        models = [new_file_record_to_model(r) for r in records]
        try:
            async with self._session_factory() as session, session.begin():
                session.add_all(models)
                await session.flush()
                saved = [file_record_model_to_domain(m) for m in models]
        except SQLAlchemyError as e:
            logger.error("Catalog insert of %d records failed: %s", len(models), e)
            raise CatalogStorageFailure(f"Could not insert file records: {e}") from e
        return saved

    async def list(
        self,
        *,
        page: int,
        page_size: int,
        sort_by: SortBy = SortBy.ORIGINAL_NAME,
    ) -> FilePage:
        if page_size < 1:
            raise ValidationFailure("page_size must be at least 1")
        if page < 1:
            return FilePage(records=[], has_more=False)

        try:
            async with self._session_factory() as session:
                # one extra row tells us whether another page exists
                stmt = (
                    select(FileRecordModel)
                    .order_by(*_order_by(sort_by, session.bind.dialect.name))
                    .offset((page - 1) * page_size)
                    .limit(page_size + 1)
                )
                rows = (await session.execute(stmt)).scalars().all()
        except SQLAlchemyError as e:
            raise CatalogStorageFailure(f"Could not list file records: {e}") from e

        records = [file_record_model_to_domain(m) for m in rows[:page_size]]
        return FilePage(records=records, has_more=len(rows) > page_size)

    async def find_by_storage_name(self, storage_name: str) -> FileRecord:
        stmt = select(FileRecordModel).where(FileRecordModel.storage_name == storage_name)
        try:
            async with self._session_factory() as session:
                model = (await session.execute(stmt)).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise CatalogStorageFailure(f"Could not look up {storage_name}: {e}") from e

        if model is None:
            raise RecordNotFound(storage_name)
        return file_record_model_to_domain(model)

    async def delete_by_storage_names(self, storage_names: Sequence[str]) -> dict[str, DeleteOutcome]:
        names = list(dict.fromkeys(storage_names))
        try:
            async with self._session_factory() as session, session.begin():
                found = (
                    await session.execute(
                        select(FileRecordModel).where(FileRecordModel.storage_name.in_(names))
                    )
                ).scalars().all()
                by_name = {m.storage_name: file_record_model_to_domain(m) for m in found}
                if by_name:
                    await session.execute(
                        sa_delete(FileRecordModel).where(FileRecordModel.storage_name.in_(list(by_name)))
                    )
        except SQLAlchemyError as e:
            raise CatalogStorageFailure(f"Could not delete file records: {e}") from e

        outcomes: dict[str, DeleteOutcome] = {}
        for name in names:
            record = by_name.get(name)
            if record is None:
                outcomes[name] = DeleteOutcome(error=MISSING_RECORD_ERROR)
            else:
                outcomes[name] = DeleteOutcome(record=record)
        return outcomes
