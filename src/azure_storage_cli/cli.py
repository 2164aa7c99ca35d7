"""Command-line interface for azure-storage.

Maps one of six modes onto a single Azure Blob Storage call:

    - list: List containers, or blobs in --container
    - get: Download --blob from --container to --local
    - put: Upload --local as a block blob
    - append: Append --local to an existing append blob
    - put-append: Create a new, empty append blob
    - delete: Delete --blob from --container

Credentials come from the command line, the --config JSON file or the
STORAGE_ACCOUNT / STORAGE_MASTER_KEY environment variables, in that order.
"""

from typing import Annotated, Optional

import typer

from . import __version__
from .cli_params import (
    blob_option,
    config_option,
    container_option,
    debug_option,
    local_option,
    mode_argument,
    storage_account_option,
    storage_master_key_option,
    version_option,
)
from .config_resolver import (
    DEFAULT_CONFIG_PATH,
    local_path_of,
    resolve_configuration,
    resolve_credentials,
)
from .core import get_logger
from .debug import debug_print, debug_request
from .dispatcher import execute
from .schemas import Mode, OperationRequest

logger = get_logger(__name__)

app = typer.Typer(
    name="azure-storage",
    help="Azure Storage file uploader and downloader.",
    no_args_is_help=True,
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"azure-storage {__version__}")
        raise typer.Exit()


@app.command()
def main(
    mode: Annotated[str, mode_argument()],
    local: Annotated[Optional[str], local_option()] = None,
    container: Annotated[Optional[str], container_option()] = None,
    blob: Annotated[Optional[str], blob_option()] = None,
    storage_account: Annotated[Optional[str], storage_account_option()] = None,
    storage_master_key: Annotated[Optional[str], storage_master_key_option()] = None,
    config: Annotated[str, config_option()] = DEFAULT_CONFIG_PATH,
    debug: Annotated[bool, debug_option()] = False,
    version: Annotated[Optional[bool], version_option(version_callback)] = None,
) -> None:
    """
    Perform one operation against Azure Blob Storage.

    Examples:
        azure-storage list
        azure-storage list -c backups
        azure-storage put -c backups -l ./report.csv
        azure-storage get -c backups -b report.csv -l ./downloads
        azure-storage put-append -c logs -b app.log
        azure-storage append -c logs -b app.log -l ./today.log
        azure-storage delete -c backups -b report.csv
    """
    try:
        cfg = resolve_configuration(
            config_path=config,
            storage_account=storage_account,
            storage_master_key=storage_master_key,
            local=local,
        )
        debug_print(cfg, debug)

        credentials = resolve_credentials(cfg)

        local_path = local_path_of(cfg)
        debug_request(mode, container, blob, local_path, debug)

        request = OperationRequest(
            mode=Mode.parse(mode),
            container=container,
            blob=blob,
            local=local_path,
        )

        execute(credentials, request, debug, echo_request=False)

    except Exception as e:
        logger.debug("Command failed", mode=mode, error=str(e))
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
