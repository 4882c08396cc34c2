from typing import Optional

from file_store.app.api.v1.files.schemas import DeletionResultResponse, FileListResponse, FileRecordResponse
from file_store.app.application.files.dto import ListFilesInputDTO
from file_store.app.core.config import settings
from file_store.app.domain.files.entities import DeletionResult, FilePage, FileRecord
from file_store.app.domain.files.value_objects import SortBy


def get_list_files_input_dto(
        page: int,
        page_size: Optional[int],
        sort_by: SortBy,
) -> ListFilesInputDTO:
    return ListFilesInputDTO(
        page=page,
        page_size=page_size or settings.DEFAULT_PAGE_SIZE,
        sort_by=sort_by,
    )


def records_to_schema(records: list[FileRecord]) -> list[FileRecordResponse]:
    return [FileRecordResponse.model_validate(r) for r in records]


def file_page_to_schema(file_page: FilePage) -> FileListResponse:
    return FileListResponse(files=records_to_schema(file_page.records), has_more=file_page.has_more)


def deletion_results_to_schema(results: list[DeletionResult]) -> list[DeletionResultResponse]:
    return [
        DeletionResultResponse(
            filename=r.storage_name,
            file_details=FileRecordResponse.model_validate(r.file_details) if r.file_details else None,
            errors=list(r.errors),
        )
        for r in results
    ]
