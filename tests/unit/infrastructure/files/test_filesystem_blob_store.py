from __future__ import annotations

from pathlib import Path

import pytest

from file_store.app.domain.files.errors import MISSING_BLOB_ERROR, BlobIOFailure, BlobNotFound
from file_store.app.domain.files.interfaces import BlobStore
from file_store.app.infrastructure.files.filesystem_blob_store import CHUNK_SIZE, FilesystemBlobStore
from tests.unit.fakes.blob_store import FakeBlobStore


pytestmark = pytest.mark.asyncio


@pytest.fixture
def store(tmp_path) -> FilesystemBlobStore:
    root = tmp_path / "files"
    root.mkdir()
    return FilesystemBlobStore(root)


async def test_store_and_fake_share_the_blob_store_protocol(store):
    assert isinstance(store, BlobStore)
    assert isinstance(FakeBlobStore(), BlobStore)


def _stage(staging_dir: Path, name: str, content: bytes) -> Path:
    path = staging_dir / name
    path.write_bytes(content)
    return path


async def test_commit_moves_staged_bytes_under_storage_name(store, staging_dir):
    staged = _stage(staging_dir, "upload_1", b"payload")

    await store.commit(staged, "abc-123")

    assert not staged.exists()
    assert (store.root / "abc-123").read_bytes() == b"payload"
    assert await store.exists("abc-123")


async def test_commit_refuses_to_overwrite(store, staging_dir):
    await store.commit(_stage(staging_dir, "one", b"first"), "same")

    with pytest.raises(BlobIOFailure):
        await store.commit(_stage(staging_dir, "two", b"second"), "same")

    assert (store.root / "same").read_bytes() == b"first"


async def test_commit_of_missing_staged_file_is_io_failure(store, staging_dir):
    with pytest.raises(BlobIOFailure):
        await store.commit(staging_dir / "never-written", "abc")


async def test_commit_rejects_unsafe_storage_name(store, staging_dir):
    with pytest.raises(BlobIOFailure):
        await store.commit(_stage(staging_dir, "x", b"x"), "../escape")


async def test_read_streams_in_chunks(store, staging_dir):
    content = b"x" * (CHUNK_SIZE * 2 + 10)
    await store.commit(_stage(staging_dir, "big", content), "big")

    chunks = [chunk async for chunk in await store.read("big")]

    assert len(chunks) == 3
    assert b"".join(chunks) == content


async def test_read_missing_blob_raises_up_front(store):
    with pytest.raises(BlobNotFound):
        await store.read("missing")


@pytest.mark.parametrize("name", ["..", ".", "", "a/b", "../files/x"])
async def test_unsafe_names_never_leave_the_root(store, tmp_path, name):
    (tmp_path / "outside").write_bytes(b"do not touch")

    assert await store.exists(name) is False
    outcomes = await store.delete([name])
    assert outcomes[name].error == MISSING_BLOB_ERROR
    assert (tmp_path / "outside").exists()


async def test_delete_reports_per_name(store, staging_dir):
    await store.commit(_stage(staging_dir, "a", b"a"), "present")

    outcomes = await store.delete(["present", "absent"])

    assert outcomes["present"].ok
    assert outcomes["absent"].error == MISSING_BLOB_ERROR
    assert not (store.root / "present").exists()


async def test_discard_staged_tolerates_missing_files(store, staging_dir):
    staged = _stage(staging_dir, "tmp", b"x")

    await store.discard_staged(staged)
    await store.discard_staged(staged)

    assert not staged.exists()
