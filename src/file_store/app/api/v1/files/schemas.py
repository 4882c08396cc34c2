from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FileRecordResponse(BaseModel):
    id: str
    original_filename: str
    filename: str = Field(validation_alias="storage_name")
    date_added: datetime
    author_id: str
    size: int
    is_private: bool
    content_type: str

    model_config = ConfigDict(from_attributes=True)


class FileListResponse(BaseModel):
    files: list[FileRecordResponse]
    has_more: bool


class DeletionResultResponse(BaseModel):
    filename: str
    file_details: Optional[FileRecordResponse] = None
    errors: list[str]
