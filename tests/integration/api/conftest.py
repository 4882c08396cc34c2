import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from file_store.app.core.deps import get_blob_store, get_catalog, get_io_timeout, get_staging_dir
from file_store.app.core.security import create_access_token
from file_store.app.infrastructure.files import FilesystemBlobStore, InMemoryFileCatalog
from file_store.app.main import create_app


@pytest.fixture
def api_catalog() -> InMemoryFileCatalog:
    return InMemoryFileCatalog()


@pytest.fixture
def api_blob_store(tmp_path) -> FilesystemBlobStore:
    root = tmp_path / "files"
    root.mkdir()
    return FilesystemBlobStore(root)


@pytest.fixture
def api_staging_dir(tmp_path):
    path = tmp_path / "temp"
    path.mkdir()
    return path


@pytest.fixture
def app(api_catalog, api_blob_store, api_staging_dir):
    app = create_app()
    app.dependency_overrides[get_catalog] = lambda: api_catalog
    app.dependency_overrides[get_blob_store] = lambda: api_blob_store
    app.dependency_overrides[get_staging_dir] = lambda: api_staging_dir
    app.dependency_overrides[get_io_timeout] = lambda: 5.0
    return app


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token('owner-42')}"}
