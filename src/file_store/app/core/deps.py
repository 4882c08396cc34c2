from functools import lru_cache
from pathlib import Path

from file_store.app.core.config import settings
from file_store.app.domain.files.interfaces import BlobStore, MetadataCatalog
from file_store.app.infrastructure.db import build_session_factory, get_engine
from file_store.app.infrastructure.files import FilesystemBlobStore, InMemoryFileCatalog, SqlAlchemyFileCatalog


@lru_cache
def get_blob_store() -> BlobStore:
    return FilesystemBlobStore(Path(settings.FILE_STORAGE_DIR))


@lru_cache
def get_catalog() -> MetadataCatalog:
    """
    Singleton catalog. The backend is picked by METADATA_BACKEND;
    use cases only see the MetadataCatalog protocol.
    """
    if settings.METADATA_BACKEND == "sql":
        return SqlAlchemyFileCatalog(build_session_factory(get_engine()))
    return InMemoryFileCatalog()


def get_staging_dir() -> Path:
    return Path(settings.FILE_STAGING_DIR)


def get_io_timeout() -> float:
    return settings.IO_TIMEOUT_S
