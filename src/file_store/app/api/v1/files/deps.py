from pathlib import Path
from typing import Annotated

from fastapi import Depends

from file_store.app.application.files.use_cases import (
    DeleteFilesUseCase,
    ListFilesUseCase,
    RetrieveFileUseCase,
    UploadFilesUseCase,
)
from file_store.app.core.deps import get_blob_store, get_catalog, get_io_timeout
from file_store.app.domain.files.interfaces import BlobStore, MetadataCatalog

catalog_dep = Annotated[MetadataCatalog, Depends(get_catalog)]
blob_store_dep = Annotated[BlobStore, Depends(get_blob_store)]
timeout_dep = Annotated[float, Depends(get_io_timeout)]


async def get_list_files_use_case(
        catalog: catalog_dep,
        timeout_s: timeout_dep,
) -> ListFilesUseCase:
    return ListFilesUseCase(catalog, timeout_s=timeout_s)


async def get_upload_files_use_case(
        catalog: catalog_dep,
        blob_store: blob_store_dep,
        timeout_s: timeout_dep,
) -> UploadFilesUseCase:
    return UploadFilesUseCase(catalog, blob_store, timeout_s=timeout_s)


async def get_retrieve_file_use_case(
        catalog: catalog_dep,
        blob_store: blob_store_dep,
        timeout_s: timeout_dep,
) -> RetrieveFileUseCase:
    return RetrieveFileUseCase(catalog, blob_store, timeout_s=timeout_s)


async def get_delete_files_use_case(
        catalog: catalog_dep,
        blob_store: blob_store_dep,
        timeout_s: timeout_dep,
) -> DeleteFilesUseCase:
    return DeleteFilesUseCase(catalog, blob_store, timeout_s=timeout_s)
