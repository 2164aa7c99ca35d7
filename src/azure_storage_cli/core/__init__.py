"""Core utilities and shared components for azure-storage."""

from .config import settings
from .exceptions import (
    ArgumentError,
    AzureStorageError,
    ConfigurationError,
    ErrorKind,
    LocalIOError,
    RemoteError,
)
from .observability import get_logger, get_tracer

__all__ = [
    "settings",
    "AzureStorageError",
    "ArgumentError",
    "ConfigurationError",
    "ErrorKind",
    "LocalIOError",
    "RemoteError",
    "get_logger",
    "get_tracer",
]
