from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import AsyncIterator, Optional
from uuid import uuid4

from file_store.app.domain.common.value_objects import utcnow

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class NewFileRecord:
    original_filename: str
    storage_name: str
    author_id: str
    size: int
    is_private: bool = True
    content_type: str = DEFAULT_CONTENT_TYPE
    date_added: datetime = field(default_factory=utcnow)

    def to_record(self, record_id: Optional[str] = None) -> FileRecord:
        return FileRecord(
            id=record_id or str(uuid4()),
            original_filename=self.original_filename,
            storage_name=self.storage_name,
            author_id=self.author_id,
            size=self.size,
            is_private=self.is_private,
            content_type=self.content_type,
            date_added=self.date_added,
        )


@dataclass(frozen=True)
class FileRecord:
    id: str
    original_filename: str
    storage_name: str
    author_id: str
    size: int
    is_private: bool
    content_type: str
    date_added: datetime


@dataclass(frozen=True)
class UploadedPayload:
    """Bytes staged on disk by the upload parser, owned by one upload call."""
    staged_path: Path
    original_filename: Optional[str]
    declared_size: Optional[int]
    content_type: Optional[str] = None


@dataclass(frozen=True)
class UploadOptions:
    is_private: bool = True


@dataclass(frozen=True)
class FilePage:
    records: list[FileRecord]
    has_more: bool


@dataclass(frozen=True)
class DeleteOutcome:
    record: Optional[FileRecord] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class DeletionResult:
    storage_name: str
    file_details: Optional[FileRecord] = None
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class AuthState:
    authenticated: bool
    owner_id: Optional[str] = None


@dataclass(frozen=True)
class RetrievedFile:
    record: FileRecord
    chunks: AsyncIterator[bytes]
