from file_store.app.infrastructure.files.filesystem_blob_store import FilesystemBlobStore
from file_store.app.infrastructure.files.memory_catalog import InMemoryFileCatalog
from file_store.app.infrastructure.files.sql_catalog import SqlAlchemyFileCatalog

__all__ = ['FilesystemBlobStore', 'InMemoryFileCatalog', 'SqlAlchemyFileCatalog']
