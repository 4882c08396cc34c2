import pytest

from file_store import cli
from file_store.app.core.config import Settings
from file_store.app.core.startup import ensure_directory, prepare_storage_dirs
from file_store.app.domain.files.errors import StorageRootUnavailable


def test_prepare_creates_missing_dirs(tmp_path):
    settings = Settings(
        FILE_STAGING_DIR=str(tmp_path / "a" / "temp"),
        FILE_STORAGE_DIR=str(tmp_path / "b" / "files"),
    )

    dirs = prepare_storage_dirs(settings)

    assert dirs.staging.is_dir()
    assert dirs.storage.is_dir()


def test_existing_dir_is_reused(tmp_path):
    (tmp_path / "files" / "keep").mkdir(parents=True)

    ensure_directory(tmp_path / "files")

    assert (tmp_path / "files" / "keep").is_dir()


def test_regular_file_in_the_way_is_fatal(tmp_path):
    blocker = tmp_path / "files"
    blocker.write_text("not a directory")

    with pytest.raises(StorageRootUnavailable) as exc_info:
        ensure_directory(blocker)

    assert exc_info.value.path == str(blocker)


def test_cli_exits_non_zero_when_storage_root_unusable(tmp_path, monkeypatch):
    blocker = tmp_path / "files"
    blocker.write_text("x")
    monkeypatch.setattr(
        cli,
        "settings",
        Settings(FILE_STAGING_DIR=str(tmp_path / "temp"), FILE_STORAGE_DIR=str(blocker)),
    )
    monkeypatch.setattr(cli.uvicorn, "run", lambda *a, **kw: pytest.fail("server must not start"))

    with pytest.raises(SystemExit) as exc_info:
        cli.main()

    assert exc_info.value.code == 1
