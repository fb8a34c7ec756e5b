"""Shared payload loading for CLI commands."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from konfigyr_artifactory.core.serializer import decode
from konfigyr_artifactory.errors import MalformedInputError
from konfigyr_artifactory.models.properties import PropertyDescriptor


def load_payload(path: Path, console: Console) -> list[PropertyDescriptor]:
    """Decode a payload file, exiting with code 1 when it is unusable."""
    if not path.exists():
        console.print(f"[bold red]Payload not found:[/bold red] {path}")
        raise typer.Exit(code=1)

    try:
        return decode(path.read_bytes())
    except MalformedInputError as exc:
        console.print(f"[bold red]Invalid payload:[/bold red] {exc}")
        raise typer.Exit(code=1) from None
