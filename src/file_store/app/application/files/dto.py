from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from file_store.app.domain.files.entities import AuthState, UploadedPayload, UploadOptions
from file_store.app.domain.files.value_objects import SortBy


@dataclass(frozen=True)
class UploadFilesInputDTO:
    owner_id: str
    payloads: list[UploadedPayload]
    options: UploadOptions = field(default_factory=UploadOptions)


@dataclass(frozen=True)
class ListFilesInputDTO:
    page: int = 1
    page_size: int = 20
    sort_by: SortBy = SortBy.ORIGINAL_NAME


@dataclass(frozen=True)
class RetrieveFileInputDTO:
    storage_name: str
    auth: AuthState


@dataclass(frozen=True)
class DeleteFilesInputDTO:
    storage_names: list[str]
    requested_by: Optional[str] = None
