"""Blob storage operations: listing, transfer and deletion.

Each operation performs exactly one call against the blob service plus at
most one local side effect (reading or writing a file). Failures from the
service surface as ``RemoteError``, failures on the local filesystem as
``LocalIOError``; nothing is retried.
"""

import base64
import hashlib
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from azure.core.exceptions import AzureError
from azure.storage.blob import BlobType, ContentSettings
from azure.storage.blob.aio import BlobServiceClient

from azure_storage_cli.core import get_logger
from azure_storage_cli.core.exceptions import LocalIOError, RemoteError

logger = get_logger(__name__)


@dataclass(frozen=True)
class ContainerRow:
    """One container in an account listing."""

    name: str
    last_modified: Optional[datetime]


@dataclass(frozen=True)
class BlobRow:
    """One blob in a container listing."""

    name: str
    last_modified: Optional[datetime]
    size: int
    blob_type: str


# Local file helpers
def content_md5(data: bytes) -> bytes:
    """MD5 digest of ``data``, as attached to uploads for integrity checks."""
    return hashlib.md5(data).digest()


def blob_name_from_path(local_path: str) -> str:
    """Use the file name of ``local_path`` as the blob name.

    Raises:
        LocalIOError: If the path has no file name component
    """
    name = os.path.basename(local_path.rstrip(os.sep))
    if name in ("", os.curdir, os.pardir):
        raise LocalIOError("Cannot extract filename from local path")
    return name


def read_local_file(local_path: str) -> bytes:
    """Read a whole local file into memory."""
    try:
        with open(local_path, "rb") as f:
            return f.read()
    except OSError as e:
        raise LocalIOError(f"Failed to read local file '{local_path}': {e}") from e


def write_local_file(local_path: str, data: bytes) -> None:
    """Write ``data`` to ``local_path``, replacing any existing file."""
    try:
        with open(local_path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise LocalIOError(f"Failed to write local file '{local_path}': {e}") from e


def complete_local_path(local_path: str, blob: str) -> str:
    """Append the blob name when ``local_path`` is an existing directory."""
    if os.path.isdir(local_path):
        return os.path.join(local_path, blob)
    return local_path


def _remote_error(action: str, error: AzureError) -> RemoteError:
    message = getattr(error, "message", None) or str(error)
    error_msg = f"Failed to {action}: {message}"
    logger.debug(error_msg, error=str(error))
    return RemoteError(error_msg)


# Listing operations
async def list_containers(service: BlobServiceClient) -> List[ContainerRow]:
    """List containers in the account (first page of results only)."""
    logger.info("Listing containers", account=service.account_name)
    rows: List[ContainerRow] = []
    try:
        async for page in service.list_containers().by_page():
            async for container in page:
                rows.append(
                    ContainerRow(
                        name=container.name,
                        last_modified=container.last_modified,
                    )
                )
            break
    except AzureError as e:
        raise _remote_error("list containers", e) from e

    logger.info("Containers listed", count=len(rows))
    return rows


async def list_blobs(service: BlobServiceClient, container: str) -> List[BlobRow]:
    """List blobs in a container (first page of results only)."""
    logger.info("Listing blobs", container=container)
    rows: List[BlobRow] = []
    try:
        container_client = service.get_container_client(container)
        async for page in container_client.list_blobs().by_page():
            async for blob in page:
                rows.append(
                    BlobRow(
                        name=blob.name,
                        last_modified=blob.last_modified,
                        size=blob.size or 0,
                        blob_type=getattr(blob.blob_type, "value", str(blob.blob_type)),
                    )
                )
            break
    except AzureError as e:
        raise _remote_error(f"list blobs in container '{container}'", e) from e

    logger.info("Blobs listed", container=container, count=len(rows))
    return rows


def format_container_listing(rows: List[ContainerRow]) -> List[str]:
    lines = [f"List of {len(rows)} containers"]
    for row in rows:
        lines.append(f" {row.last_modified} {row.name}")
    return lines


def format_blob_listing(container: str, rows: List[BlobRow]) -> List[str]:
    lines = [f"List of {len(rows)} blobs in container '{container}'"]
    for row in rows:
        lines.append(f" {row.last_modified} {row.size:>8} {row.blob_type:>10} {row.name}")
    return lines


# Write operations
async def create_append_blob(
    service: BlobServiceClient, container: str, blob: str
) -> Dict[str, Any]:
    """Create a new, empty append blob."""
    logger.info("Creating append blob", container=container, blob=blob)
    try:
        blob_client = service.get_blob_client(container, blob)
        return await blob_client.create_append_blob()
    except AzureError as e:
        raise _remote_error(f"create append blob '{container}/{blob}'", e) from e


async def put_block_blob(
    service: BlobServiceClient, container: str, blob: str, data: bytes
) -> Dict[str, Any]:
    """Upload ``data`` as a block blob, replacing any existing blob.

    The MD5 of ``data`` is stored as the blob's content MD5, and every
    request carries a transactional checksum the service verifies.
    """
    digest = content_md5(data)
    logger.info(
        "Uploading block blob",
        container=container,
        blob=blob,
        size=len(data),
        content_md5=base64.b64encode(digest).decode("ascii"),
    )
    try:
        blob_client = service.get_blob_client(container, blob)
        return await blob_client.upload_blob(
            data,
            blob_type=BlobType.BLOCKBLOB,
            overwrite=True,
            content_settings=ContentSettings(content_md5=bytearray(digest)),
            validate_content=True,
        )
    except AzureError as e:
        raise _remote_error(f"upload block blob '{container}/{blob}'", e) from e


async def append_block(
    service: BlobServiceClient, container: str, blob: str, data: bytes
) -> Dict[str, Any]:
    """Append ``data`` as one block to an existing append blob.

    The request carries the MD5 of ``data`` as its ``Content-MD5`` header.
    """
    digest = base64.b64encode(content_md5(data)).decode("ascii")
    logger.info(
        "Appending block",
        container=container,
        blob=blob,
        size=len(data),
        content_md5=digest,
    )
    try:
        blob_client = service.get_blob_client(container, blob)
        return await blob_client.append_block(
            data,
            length=len(data),
            headers={"Content-MD5": digest},
        )
    except AzureError as e:
        raise _remote_error(f"append to blob '{container}/{blob}'", e) from e


# Read operations
async def download_blob(
    service: BlobServiceClient, container: str, blob: str, local_path: str
) -> Any:
    """Download a blob's full content to ``local_path``.

    Returns:
        The downloaded blob's properties
    """
    logger.info("Downloading blob", container=container, blob=blob, local_path=local_path)
    try:
        blob_client = service.get_blob_client(container, blob)
        downloader = await blob_client.download_blob()
        data = await downloader.readall()
    except AzureError as e:
        raise _remote_error(f"download blob '{container}/{blob}'", e) from e

    write_local_file(local_path, data)
    logger.info("Blob downloaded", local_path=local_path, size=len(data))
    return downloader.properties


async def delete_blob(
    service: BlobServiceClient, container: str, blob: str
) -> Dict[str, Any]:
    """Delete a blob."""
    logger.info("Deleting blob", container=container, blob=blob)
    try:
        blob_client = service.get_blob_client(container, blob)
        await blob_client.delete_blob()
    except AzureError as e:
        raise _remote_error(f"delete blob '{container}/{blob}'", e) from e

    return {"container": container, "blob": blob, "deleted": True}
