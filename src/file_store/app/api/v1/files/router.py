from pathlib import Path
from typing import Annotated, Any, Optional

from fastapi import APIRouter, Body, Depends, File, Form, Query, UploadFile, status
from fastapi.responses import StreamingResponse

from file_store.app.api.v1.auth.deps import get_auth_state, require_auth
from file_store.app.api.v1.files.deps import (
    get_delete_files_use_case,
    get_list_files_use_case,
    get_retrieve_file_use_case,
    get_upload_files_use_case,
)
from file_store.app.api.v1.files.mappers import (
    deletion_results_to_schema,
    file_page_to_schema,
    get_list_files_input_dto,
    records_to_schema,
)
from file_store.app.api.v1.files.schemas import DeletionResultResponse, FileListResponse, FileRecordResponse
from file_store.app.api.v1.files.staging import stage_uploads
from file_store.app.application.files.decoders import decode_storage_names, decode_upload_options
from file_store.app.application.files.dto import DeleteFilesInputDTO, RetrieveFileInputDTO, UploadFilesInputDTO
from file_store.app.application.files.use_cases import (
    DeleteFilesUseCase,
    ListFilesUseCase,
    RetrieveFileUseCase,
    UploadFilesUseCase,
)
from file_store.app.core.deps import get_staging_dir
from file_store.app.domain.common.result import Err
from file_store.app.domain.files.entities import AuthState
from file_store.app.domain.files.errors import ValidationFailure
from file_store.app.domain.files.value_objects import SortBy, sanitize_filename

router = APIRouter(prefix="/files", tags=["files"])

auth_state_dep = Annotated[AuthState, Depends(get_auth_state)]
authenticated_dep = Annotated[AuthState, Depends(require_auth)]
staging_dir_dep = Annotated[Path, Depends(get_staging_dir)]
list_files_dep = Annotated[ListFilesUseCase, Depends(get_list_files_use_case)]
upload_files_dep = Annotated[UploadFilesUseCase, Depends(get_upload_files_use_case)]
retrieve_file_dep = Annotated[RetrieveFileUseCase, Depends(get_retrieve_file_use_case)]
delete_files_dep = Annotated[DeleteFilesUseCase, Depends(get_delete_files_use_case)]


@router.get("/list", response_model=FileListResponse)
async def list_files(
        _: authenticated_dep,
        use_case: list_files_dep,
        page: Annotated[int, Query(ge=1)] = 1,
        page_size: Annotated[Optional[int], Query(ge=1, le=1000)] = None,
        sort_by: SortBy = SortBy.ORIGINAL_NAME,
):
    dto = get_list_files_input_dto(page, page_size, sort_by)
    file_page = await use_case.execute(dto)
    return file_page_to_schema(file_page)


@router.post("/upload", response_model=list[FileRecordResponse], status_code=status.HTTP_201_CREATED)
async def upload_files(
        auth: authenticated_dep,
        use_case: upload_files_dep,
        staging_dir: staging_dir_dep,
        file: Annotated[list[UploadFile], File()],
        ops: Annotated[Optional[str], Form()] = None,
):
    options = decode_upload_options(ops)
    if isinstance(options, Err):
        raise ValidationFailure(options.reason)

    payloads = await stage_uploads(file, staging_dir)
    dto = UploadFilesInputDTO(owner_id=auth.owner_id, payloads=payloads, options=options.value)
    records = await use_case.execute(dto)
    return records_to_schema(records)


@router.post("/delete", response_model=list[DeletionResultResponse])
async def delete_files(
        auth: authenticated_dep,
        use_case: delete_files_dep,
        body: Annotated[Any, Body()],
):
    names = decode_storage_names(body)
    if isinstance(names, Err):
        raise ValidationFailure(names.reason)

    results = await use_case.execute(DeleteFilesInputDTO(storage_names=names.value, requested_by=auth.owner_id))
    return deletion_results_to_schema(results)


@router.get("/{name}")
async def retrieve_file(
        name: str,
        auth: auth_state_dep,
        use_case: retrieve_file_dep,
) -> StreamingResponse:
    retrieved = await use_case.execute(RetrieveFileInputDTO(storage_name=name, auth=auth))
    record = retrieved.record
    return StreamingResponse(
        retrieved.chunks,
        media_type=record.content_type,
        headers={
            "Content-Disposition": f'inline; filename="{sanitize_filename(record.original_filename)}"',
        },
    )
