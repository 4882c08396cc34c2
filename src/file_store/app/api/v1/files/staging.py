from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence
from uuid import uuid4

import anyio
from fastapi import UploadFile

from file_store.app.domain.files.entities import UploadedPayload

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


async def stage_upload(file: UploadFile, staging_dir: Path) -> UploadedPayload:
    staged_path = staging_dir / f"upload_{uuid4().hex}"
    written = 0
    async with await anyio.open_file(staged_path, "wb") as out:
        while chunk := await file.read(CHUNK_SIZE):
            await out.write(chunk)
            written += len(chunk)

    return UploadedPayload(
        staged_path=staged_path,
        original_filename=file.filename,
        declared_size=file.size if file.size is not None else written,
        content_type=file.content_type,
    )


async def stage_uploads(files: Sequence[UploadFile], staging_dir: Path) -> list[UploadedPayload]:
    """
    Stream every multipart file into the staging directory.
    On failure, whatever was already staged is removed before re-raising.
    """
    staged: list[UploadedPayload] = []
    try:
        for file in files:
            staged.append(await stage_upload(file, staging_dir))
    except OSError:
        logger.exception("Failed to stage uploaded files")
        for payload in staged:
            await anyio.Path(payload.staged_path).unlink(missing_ok=True)
        raise
    return staged
