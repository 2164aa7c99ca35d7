"""Blob storage client management and operations."""

from .client import BlobClientConfig, BlobServiceManager
from .operations import (
    BlobRow,
    ContainerRow,
    append_block,
    blob_name_from_path,
    complete_local_path,
    content_md5,
    create_append_blob,
    delete_blob,
    download_blob,
    list_blobs,
    list_containers,
    put_block_blob,
    read_local_file,
)

__all__ = [
    "BlobClientConfig",
    "BlobServiceManager",
    "BlobRow",
    "ContainerRow",
    "append_block",
    "blob_name_from_path",
    "complete_local_path",
    "content_md5",
    "create_append_blob",
    "delete_blob",
    "download_blob",
    "list_blobs",
    "list_containers",
    "put_block_blob",
    "read_local_file",
]
