from __future__ import annotations

import errno
import logging
import os
import shutil
from pathlib import Path
from typing import AsyncIterator, Sequence

import anyio
import anyio.to_thread

from file_store.app.domain.files.entities import DeleteOutcome
from file_store.app.domain.files.errors import MISSING_BLOB_ERROR, BlobIOFailure, BlobNotFound
from file_store.app.domain.files.value_objects import sanitize_filename

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def _move(source: Path, target: Path) -> None:
    try:
        os.rename(source, target)
    except OSError as e:
        if e.errno != errno.EXDEV:
            raise
        # staging dir on another device: copy into place, then drop the source
        shutil.move(os.fspath(source), os.fspath(target))


class FilesystemBlobStore:
    """
    Flat directory of blobs, one file per storage name.
    """

    def __init__(self, root: Path) -> None:
        self.root = root

    def _path_for(self, storage_name: str) -> Path:
        safe = sanitize_filename(storage_name)
        if not safe or safe != storage_name or safe in (".", ".."):
            raise BlobNotFound(storage_name)
        return self.root / safe

    async def commit(self, staged_path: Path, storage_name: str) -> None:
        try:
            target = self._path_for(storage_name)
        except BlobNotFound:
            raise BlobIOFailure(storage_name, "invalid storage name")

        if await anyio.Path(target).exists():
            raise BlobIOFailure(storage_name, "storage name already in use")

        try:
            await anyio.to_thread.run_sync(_move, staged_path, target)
        except OSError as e:
            raise BlobIOFailure(storage_name, str(e)) from e
        logger.debug("Committed %s -> %s", staged_path, target)

    async def exists(self, storage_name: str) -> bool:
        try:
            path = self._path_for(storage_name)
        except BlobNotFound:
            return False
        return await anyio.Path(path).is_file()

    async def read(self, storage_name: str) -> AsyncIterator[bytes]:
        path = self._path_for(storage_name)
        if not await anyio.Path(path).is_file():
            raise BlobNotFound(storage_name)
        return self._stream(path)

    async def _stream(self, path: Path) -> AsyncIterator[bytes]:
        async with await anyio.open_file(path, "rb") as f:
            while True:
                chunk = await f.read(CHUNK_SIZE)
                if not chunk:
                    break
                yield chunk

    async def delete(self, storage_names: Sequence[str]) -> dict[str, DeleteOutcome]:
        outcomes: dict[str, DeleteOutcome] = {}
        for name in storage_names:
            outcomes[name] = await self._delete_one(name)
        return outcomes

    async def _delete_one(self, storage_name: str) -> DeleteOutcome:
        try:
            path = self._path_for(storage_name)
            await anyio.Path(path).unlink()
        except (BlobNotFound, FileNotFoundError):
            return DeleteOutcome(error=MISSING_BLOB_ERROR)
        except OSError as e:
            logger.warning("Error deleting blob %s: %s", storage_name, e)
            return DeleteOutcome(error=f"Error Deleting File: {e}")
        return DeleteOutcome()

    async def discard_staged(self, staged_path: Path) -> None:
        await anyio.Path(staged_path).unlink(missing_ok=True)
