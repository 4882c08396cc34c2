from __future__ import annotations

from typing import Optional


class FileStoreError(Exception):
    pass


class ValidationFailure(FileStoreError):
    """Malformed input, rejected before any I/O."""
    pass


class BlobIOFailure(FileStoreError):
    def __init__(self, storage_name: str, reason: str):
        self.storage_name = storage_name
        super().__init__(f"Blob store operation failed for {storage_name}: {reason}")


class CatalogStorageFailure(FileStoreError):
    pass


class FileNotFound(FileStoreError):
    def __init__(self, storage_name: str):
        self.storage_name = storage_name
        super().__init__(f"File {storage_name} not found.")


class RecordNotFound(FileNotFound):
    pass


class BlobNotFound(FileNotFound):
    pass


class FileUnavailable(FileStoreError):
    """Uniform denial for callers that may not learn whether a file exists."""

    def __init__(self):
        super().__init__("File not available")


class UploadFailure(FileStoreError):
    def __init__(self, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(f"Error uploading files: {cause}" if cause else "Error uploading files")


class DeletionFailure(FileStoreError):
    def __init__(self, reason: str):
        super().__init__(f"Error deleting files: {reason}")


class StorageRootUnavailable(FileStoreError):
    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Invalid storage directory {path}: {reason}")


# per-item messages used in deletion reports
MISSING_RECORD_ERROR = "File Does Not Exist In Database"
MISSING_BLOB_ERROR = "File Does Not Exist In File System"
