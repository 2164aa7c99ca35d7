"""Debug reporter: field-labelled dumps of intermediate state."""

import dataclasses
from collections.abc import Mapping
from enum import Enum
from pprint import pformat
from typing import Any, Optional

import typer
from pydantic import BaseModel


def _plain(value: Any) -> Any:
    """Convert ``value`` into plain containers that pprint labels by field."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _plain(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Mapping):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    if hasattr(value, "__dict__") and not isinstance(value, type):
        # SDK models (BlobProperties, ContentSettings, ...)
        return {
            k: _plain(v) for k, v in vars(value).items() if not k.startswith("_")
        }
    return value


def format_debug(value: Any) -> str:
    """Render ``value`` as an indented, field-labelled string."""
    return pformat(_plain(value), indent=1, width=88, sort_dicts=False)


def debug_print(value: Any, debug: bool) -> None:
    """Print ``value`` when ``debug`` is set; otherwise do nothing."""
    if debug:
        typer.echo("\n" + format_debug(value))


def debug_request(
    mode: Any,
    container: Optional[str],
    blob: Optional[str],
    local: Optional[str],
    debug: bool,
) -> None:
    """Print the request parameters, one labelled line each."""
    if debug:
        typer.echo(f"mode = {_plain(mode)}")
        typer.echo(f"container name = {container}")
        typer.echo(f"blob name = {blob}")
        typer.echo(f"local path = {local}")
