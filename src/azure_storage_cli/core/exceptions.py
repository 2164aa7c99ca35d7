"""Exception hierarchy for azure-storage.

Every failure the tool can report belongs to exactly one ``ErrorKind``.
The CLI only ever has to catch ``AzureStorageError``.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of error categories."""

    CONFIGURATION = "configuration"
    ARGUMENT = "argument"
    LOCAL_IO = "local_io"
    REMOTE = "remote"


class AzureStorageError(Exception):
    """Base exception for all azure-storage errors."""

    kind: ErrorKind = ErrorKind.REMOTE

    def __init__(self, message: str, kind: ErrorKind | None = None):
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind

    def __str__(self) -> str:
        return self.message


class ConfigurationError(AzureStorageError):
    """Raised when credentials are missing or the config file is malformed."""

    kind = ErrorKind.CONFIGURATION


class ArgumentError(AzureStorageError):
    """Raised when the selected mode lacks a required argument or is unknown."""

    kind = ErrorKind.ARGUMENT


class LocalIOError(AzureStorageError):
    """Raised when reading or writing a local file fails."""

    kind = ErrorKind.LOCAL_IO


class RemoteError(AzureStorageError):
    """Raised when the storage service call fails."""

    kind = ErrorKind.REMOTE
