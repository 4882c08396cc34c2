from pathlib import Path
from typing import Callable

import pytest

from file_store.app.domain.files.entities import UploadedPayload
from file_store.app.infrastructure.files.memory_catalog import InMemoryFileCatalog
from tests.unit.fakes.blob_store import FakeBlobStore


@pytest.fixture
def catalog() -> InMemoryFileCatalog:
    return InMemoryFileCatalog()


@pytest.fixture
def blob_store() -> FakeBlobStore:
    return FakeBlobStore()


@pytest.fixture
def staging_dir(tmp_path) -> Path:
    path = tmp_path / "staging"
    path.mkdir()
    return path


@pytest.fixture
def make_payload(staging_dir) -> Callable[..., UploadedPayload]:
    """
    Write bytes into the staging dir the way the upload parser would.
    """
    counter = iter(range(10_000))

    def _make(
        content: bytes = b"hello",
        original_filename: str = "hello.txt",
        content_type: str | None = "text/plain",
    ) -> UploadedPayload:
        staged_path = staging_dir / f"upload_{next(counter)}"
        staged_path.write_bytes(content)
        return UploadedPayload(
            staged_path=staged_path,
            original_filename=original_filename,
            declared_size=len(content),
            content_type=content_type,
        )

    return _make
