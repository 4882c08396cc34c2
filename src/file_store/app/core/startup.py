from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from file_store.app.core.config import Settings
from file_store.app.domain.files.errors import StorageRootUnavailable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StorageDirs:
    staging: Path
    storage: Path


def ensure_directory(path: Path) -> Path:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageRootUnavailable(str(path), str(e)) from e
    if not path.is_dir():
        raise StorageRootUnavailable(str(path), "not a directory")
    if not os.access(path, os.W_OK | os.X_OK):
        raise StorageRootUnavailable(str(path), "directory is not writable")
    return path


def prepare_storage_dirs(settings: Settings) -> StorageDirs:
    """
    Create the staging and storage directories if missing.
    Raises StorageRootUnavailable; the process entry point decides how to exit.
    """
    dirs = StorageDirs(
        staging=ensure_directory(Path(settings.FILE_STAGING_DIR)),
        storage=ensure_directory(Path(settings.FILE_STORAGE_DIR)),
    )
    logger.info("Staging files in %s, storing files in %s", dirs.staging, dirs.storage)
    return dirs
