"""``konfigyr-artifactory checksum PAYLOAD`` — print the property set checksum."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from konfigyr_artifactory.cli.commands._payload import load_payload
from konfigyr_artifactory.core.hasher import compute_checksum
from konfigyr_artifactory.errors import InvalidArgumentError

console = Console()


def checksum_cmd(
    payload: Path = typer.Argument(..., help="Path to a component payload (JSON)."),
    algorithm: str = typer.Option(
        None, "--algorithm", "-a", help="Digest algorithm, defaults to the configured one."
    ),
) -> None:
    """Compute the checksum the registry would record for this payload."""
    descriptors = load_payload(payload, console)
    try:
        checksum = compute_checksum(descriptors, algorithm)
    except InvalidArgumentError as exc:
        console.print(f"[bold red]{exc}[/bold red]")
        raise typer.Exit(code=1) from None
    typer.echo(checksum)
