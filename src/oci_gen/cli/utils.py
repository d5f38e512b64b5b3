"""Shared utilities for CLI commands."""

from typing import NoReturn

import typer
from rich.console import Console

from oci_gen.utils.errors import OciGenError

# Shared console instances
console = Console()
err_console = Console(stderr=True)


def fail(error: OciGenError) -> NoReturn:
    """Print an oci-gen error and exit with status 1.

    Args:
        error: The error to report
    """
    detail = error.to_error_detail()
    err_console.print(f"[red]Error:[/red] {detail.message}")
    for key, value in detail.details.items():
        err_console.print(f"  [dim]{key}:[/dim] {value}")
    raise typer.Exit(1)


def split_fields(value: str, option: str, count: int, minimum: int | None = None) -> list[str]:
    """Split a colon separated option value.

    Args:
        value: Raw option value, e.g. "RLIMIT_NOFILE:1024:1024"
        option: Option name for error messages
        count: Maximum number of fields; the last one keeps any extra colons
        minimum: Minimum number of fields (defaults to count)

    Returns:
        The fields

    Raises:
        typer.BadParameter: If too few fields are given
    """
    parts = value.split(":", count - 1)
    if len(parts) < (minimum if minimum is not None else count):
        raise typer.BadParameter(f"invalid value {value!r}", param_hint=option)
    return parts


def split_key_value(value: str, option: str) -> tuple[str, str]:
    """Split a KEY=value option value.

    Raises:
        typer.BadParameter: If there is no "=" or the key is empty
    """
    key, sep, val = value.partition("=")
    if not sep or not key:
        raise typer.BadParameter(f"expected KEY=VALUE, got {value!r}", param_hint=option)
    return key, val


def parse_int(value: str, option: str) -> int:
    """Parse an integer field of an option value.

    Raises:
        typer.BadParameter: If the field is not an integer
    """
    try:
        return int(value)
    except ValueError:
        raise typer.BadParameter(f"expected an integer, got {value!r}", param_hint=option) from None
