"""Dispatch a parsed request to exactly one blob storage operation.

Each ``Mode`` maps onto one handler. Required arguments are checked before
the blob service client is created, so a request that is missing a
container, blob or local path never reaches the network.
"""

import asyncio
from typing import Any, Awaitable, Callable, Dict, Optional

import typer
from azure.storage.blob.aio import BlobServiceClient

from azure_storage_cli.blobstorage import (
    BlobClientConfig,
    BlobServiceManager,
    append_block,
    blob_name_from_path,
    complete_local_path,
    create_append_blob,
    delete_blob,
    download_blob,
    list_blobs,
    list_containers,
    put_block_blob,
    read_local_file,
)
from azure_storage_cli.blobstorage.operations import (
    format_blob_listing,
    format_container_listing,
)
from azure_storage_cli.core import get_logger, get_tracer
from azure_storage_cli.core.exceptions import ArgumentError
from azure_storage_cli.debug import debug_print, debug_request
from azure_storage_cli.schemas import Mode, OperationRequest, ResolvedCredentials

logger = get_logger(__name__)
tracer = get_tracer(__name__)

Handler = Callable[[BlobServiceClient, OperationRequest, bool], Awaitable[Any]]


def _require(value: Optional[str], message: str) -> str:
    if value is None:
        raise ArgumentError(message)
    return value


def validate_request(request: OperationRequest) -> OperationRequest:
    """Check the arguments the selected mode needs.

    For ``put`` and ``append`` a missing blob name defaults to the file
    name of the local path.

    Raises:
        ArgumentError: If a required argument is missing
        LocalIOError: If no blob name can be derived from the local path
    """
    mode = request.mode

    if mode in (Mode.PUT_APPEND, Mode.DELETE):
        _require(request.container, "No container name specified")
        _require(request.blob, "No blob name specified")

    elif mode in (Mode.PUT, Mode.APPEND):
        local = _require(request.local, "No local path specified")
        _require(request.container, "No container name specified")
        if request.blob is None:
            return request.model_copy(update={"blob": blob_name_from_path(local)})

    elif mode == Mode.GET:
        _require(request.container, "No container name specified")
        _require(request.blob, "No blob name specified")
        _require(request.local, "No local path specified")

    return request


async def _list(service: BlobServiceClient, request: OperationRequest, debug: bool) -> Any:
    if request.container is not None:
        rows = await list_blobs(service, request.container)
        lines = format_blob_listing(request.container, rows)
    else:
        rows = await list_containers(service)
        lines = format_container_listing(rows)

    for line in lines:
        typer.echo(line)
    return rows


async def _put_append(
    service: BlobServiceClient, request: OperationRequest, debug: bool
) -> Any:
    return await create_append_blob(service, request.container, request.blob)


async def _put(service: BlobServiceClient, request: OperationRequest, debug: bool) -> Any:
    data = read_local_file(request.local)
    return await put_block_blob(service, request.container, request.blob, data)


async def _append(service: BlobServiceClient, request: OperationRequest, debug: bool) -> Any:
    data = read_local_file(request.local)
    return await append_block(service, request.container, request.blob, data)


async def _get(service: BlobServiceClient, request: OperationRequest, debug: bool) -> Any:
    local_path = complete_local_path(request.local, request.blob)
    if debug and local_path != request.local:
        typer.echo(f"local path (complemented) = {local_path}")
    return await download_blob(service, request.container, request.blob, local_path)


async def _delete(service: BlobServiceClient, request: OperationRequest, debug: bool) -> Any:
    return await delete_blob(service, request.container, request.blob)


HANDLERS: Dict[Mode, Handler] = {
    Mode.LIST: _list,
    Mode.PUT_APPEND: _put_append,
    Mode.PUT: _put,
    Mode.APPEND: _append,
    Mode.GET: _get,
    Mode.DELETE: _delete,
}


async def run_request(
    credentials: ResolvedCredentials,
    request: OperationRequest,
    debug: bool = False,
    echo_request: bool = True,
) -> Any:
    """Validate ``request`` and perform its single operation.

    With ``debug``, the request parameters are printed before validation
    unless the caller already printed them (``echo_request=False``).

    Returns:
        The result of the operation (listing rows or the service response)

    Raises:
        AzureStorageError: On the first failure; nothing is retried
    """
    if echo_request:
        debug_request(
            request.mode, request.container, request.blob, request.local, debug
        )

    request = validate_request(request)
    handler = HANDLERS[request.mode]

    manager = BlobServiceManager(BlobClientConfig.from_credentials(credentials))
    debug_print(manager.describe(), debug)

    logger.info(
        "Running operation",
        mode=request.mode.value,
        container=request.container,
        blob=request.blob,
    )
    async with manager as service:
        with tracer.start_as_current_span(f"azure_storage.{request.mode.value}") as span:
            span.set_attribute("azure_storage.account", credentials.account_name)
            if request.container:
                span.set_attribute("azure_storage.container", request.container)
            if request.blob:
                span.set_attribute("azure_storage.blob", request.blob)
            result = await handler(service, request, debug)

    debug_print(result, debug)
    return result


def execute(
    credentials: ResolvedCredentials,
    request: OperationRequest,
    debug: bool = False,
    echo_request: bool = True,
) -> Any:
    """Run one request on a fresh event loop."""
    return asyncio.run(run_request(credentials, request, debug, echo_request))
