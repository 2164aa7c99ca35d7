"""Test configuration and fixtures for azure-storage."""

import hashlib
import types
from datetime import datetime, timezone

import pytest
from pydantic import SecretStr

from azure_storage_cli.schemas import ResolvedCredentials

LAST_MODIFIED = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


async def _aiter(items):
    for item in items:
        yield item


class FakePaged:
    """Stands in for AsyncItemPaged; yields the given pages from by_page()."""

    def __init__(self, pages):
        self.pages = pages

    def by_page(self):
        return _aiter([_aiter(page) for page in self.pages])


class FakeDownloader:
    def __init__(self, data: bytes, name: str):
        self._data = data
        self.properties = types.SimpleNamespace(
            name=name,
            size=len(data),
            content_settings=types.SimpleNamespace(
                content_md5=bytearray(hashlib.md5(data).digest())
            ),
        )

    async def readall(self) -> bytes:
        return self._data


class FakeBlobClient:
    def __init__(self, service, container: str, blob: str):
        self.service = service
        self.container = container
        self.blob = blob

    def _record(self, name, *args, **kwargs):
        self.service.calls.append((name, self.container, self.blob, args, kwargs))
        if self.service.error is not None:
            raise self.service.error

    async def create_append_blob(self, **kwargs):
        self._record("create_append_blob", **kwargs)
        self.service.blobs[(self.container, self.blob)] = b""
        return {"etag": '"0x1"', "last_modified": LAST_MODIFIED}

    async def upload_blob(self, data, **kwargs):
        self._record("upload_blob", data, **kwargs)
        self.service.blobs[(self.container, self.blob)] = bytes(data)
        return {"etag": '"0x2"', "content_md5": kwargs["content_settings"].content_md5}

    async def append_block(self, data, **kwargs):
        self._record("append_block", data, **kwargs)
        key = (self.container, self.blob)
        self.service.blobs[key] = self.service.blobs.get(key, b"") + bytes(data)
        return {"etag": '"0x3"', "blob_append_offset": "0"}

    async def download_blob(self, **kwargs):
        self._record("download_blob", **kwargs)
        return FakeDownloader(self.service.blobs[(self.container, self.blob)], self.blob)

    async def delete_blob(self, **kwargs):
        self._record("delete_blob", **kwargs)
        self.service.blobs.pop((self.container, self.blob), None)


class FakeContainerClient:
    def __init__(self, service, container: str):
        self.service = service
        self.container = container

    def list_blobs(self, **kwargs):
        self.service.calls.append(("list_blobs", self.container, None, (), kwargs))
        if self.service.error is not None:
            raise self.service.error
        return FakePaged(self.service.blob_pages.get(self.container, [[]]))


class FakeBlobServiceClient:
    """In-memory stand-in for azure.storage.blob.aio.BlobServiceClient."""

    def __init__(self):
        self.account_name = "testaccount"
        self.url = "https://testaccount.blob.core.windows.net/"
        self.api_version = "2023-11-03"
        self.account_url = None
        self.credential = None
        self.calls = []
        self.blobs = {}
        self.container_pages = [[]]
        self.blob_pages = {}
        self.error = None
        self.closed = False

    def list_containers(self, **kwargs):
        self.calls.append(("list_containers", None, None, (), kwargs))
        if self.error is not None:
            raise self.error
        return FakePaged(self.container_pages)

    def get_container_client(self, container):
        return FakeContainerClient(self, container)

    def get_blob_client(self, container, blob):
        return FakeBlobClient(self, container, blob)

    async def close(self):
        self.closed = True


def container_item(name):
    return types.SimpleNamespace(name=name, last_modified=LAST_MODIFIED)


def blob_item(name, size, blob_type="BlockBlob"):
    return types.SimpleNamespace(
        name=name, last_modified=LAST_MODIFIED, size=size, blob_type=blob_type
    )


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep credentials in the real environment out of every test."""
    monkeypatch.delenv("STORAGE_ACCOUNT", raising=False)
    monkeypatch.delenv("STORAGE_MASTER_KEY", raising=False)


@pytest.fixture
def temp_dir(tmp_path):
    """Create a temporary directory for testing."""
    return tmp_path


@pytest.fixture
def sample_file(temp_dir):
    """Create a local file to upload."""
    data_dir = temp_dir / "data"
    data_dir.mkdir()
    path = data_dir / "report.csv"
    path.write_bytes(b"id,value\n1,42\n2,17\n")
    return path


@pytest.fixture
def credentials():
    return ResolvedCredentials(account_name="testaccount", account_key=SecretStr("a2V5"))


@pytest.fixture
def fake_service(monkeypatch):
    """Replace the SDK client constructor with an in-memory fake."""
    service = FakeBlobServiceClient()

    def factory(account_url, credential):
        service.account_url = account_url
        service.credential = credential
        return service

    monkeypatch.setattr("azure_storage_cli.blobstorage.client.BlobServiceClient", factory)
    return service
