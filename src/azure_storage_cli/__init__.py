"""Command-line access to Azure Blob Storage.

This package maps a small set of commands (list, get, put, append,
put-append, delete) onto single calls against the Azure Blob Storage API.
Credentials are resolved from command-line flags, a JSON config file and
environment variables.

Library Usage:
    >>> from azure_storage_cli import (
    ...     Mode, OperationRequest, resolve_configuration, resolve_credentials, execute
    ... )
    >>> config = resolve_configuration("azure-storage.json")
    >>> credentials = resolve_credentials(config)
    >>> execute(credentials, OperationRequest(mode=Mode.LIST, container="data"))
"""

__version__ = "0.1.0"

from .config_resolver import (
    load_config_file,
    merge_cli_overrides,
    resolve_configuration,
    resolve_credentials,
)
from .debug import debug_print, debug_request
from .dispatcher import HANDLERS, execute, run_request, validate_request
from .schemas import Mode, OperationRequest, ResolvedCredentials, StorageConfig

__all__ = [
    # Configuration
    "StorageConfig",
    "ResolvedCredentials",
    "load_config_file",
    "merge_cli_overrides",
    "resolve_configuration",
    "resolve_credentials",
    # Requests and dispatch
    "Mode",
    "OperationRequest",
    "HANDLERS",
    "execute",
    "run_request",
    "validate_request",
    # Diagnostics
    "debug_print",
    "debug_request",
]
