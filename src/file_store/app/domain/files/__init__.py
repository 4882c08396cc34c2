from file_store.app.domain.files.entities import (
    AuthState,
    DeleteOutcome,
    DeletionResult,
    FilePage,
    FileRecord,
    NewFileRecord,
    RetrievedFile,
    UploadedPayload,
    UploadOptions,
)
from file_store.app.domain.files.value_objects import SortBy, sanitize_filename

__all__ = [
    'AuthState',
    'DeleteOutcome',
    'DeletionResult',
    'FilePage',
    'FileRecord',
    'NewFileRecord',
    'RetrievedFile',
    'UploadedPayload',
    'UploadOptions',
    'SortBy',
    'sanitize_filename',
]
