"""Shared CLI parameter definitions.

Each function returns the ``typer.Option`` used in a command signature, so
flag names and help text are defined in one place:

    @app.command()
    def main(container: Annotated[Optional[str], container_option()] = None):
        ...
"""

from typing import Annotated, Optional

import typer

from azure_storage_cli.schemas import Mode

MODE_CHOICES = ", ".join(mode.value for mode in Mode)


def mode_argument() -> Annotated[str, typer.Argument]:
    """Operation mode positional argument."""
    return typer.Argument(
        metavar="MODE",
        help=f"Operation to perform: {MODE_CHOICES}",
        show_default=False,
    )


def local_option() -> Annotated[Optional[str], typer.Option]:
    """Local path option."""
    return typer.Option("--local", "-l", help="Local file path to put or get")


def container_option() -> Annotated[Optional[str], typer.Option]:
    """Container name option."""
    return typer.Option(
        "--container", "-c", help="Remote container name on Azure Storage"
    )


def blob_option() -> Annotated[Optional[str], typer.Option]:
    """Blob name option."""
    return typer.Option("--blob", "-b", help="Remote blob name on Azure Storage")


def storage_account_option() -> Annotated[Optional[str], typer.Option]:
    """Storage account option."""
    return typer.Option(
        "--storage_account",
        "-a",
        help="Storage account name (falls back to STORAGE_ACCOUNT)",
    )


def storage_master_key_option() -> Annotated[Optional[str], typer.Option]:
    """Storage master key option."""
    return typer.Option(
        "--storage_master_key",
        "-k",
        help="Storage account key (falls back to STORAGE_MASTER_KEY)",
    )


def config_option() -> Annotated[str, typer.Option]:
    """Config file option."""
    return typer.Option("--config", help="Config file path")


def debug_option() -> Annotated[bool, typer.Option]:
    """Debug flag."""
    return typer.Option("--debug", help="Enable debug print")


def version_option(callback) -> Annotated[Optional[bool], typer.Option]:
    """Version flag."""
    return typer.Option(
        "--version", callback=callback, is_eager=True, help="Show version."
    )
