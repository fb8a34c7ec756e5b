"""``konfigyr-artifactory verify PAYLOAD CHECKSUM`` — detect tampered uploads."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from konfigyr_artifactory.cli.commands._payload import load_payload
from konfigyr_artifactory.core.hasher import compute_checksum
from konfigyr_artifactory.errors import InvalidArgumentError

console = Console()


def verify_cmd(
    payload: Path = typer.Argument(..., help="Path to a component payload (JSON)."),
    checksum: str = typer.Argument(..., help="Checksum recorded by the release."),
    algorithm: str = typer.Option(
        None, "--algorithm", "-a", help="Digest algorithm, defaults to the configured one."
    ),
) -> None:
    """Recompute the payload checksum and compare it with the recorded one."""
    descriptors = load_payload(payload, console)
    try:
        actual = compute_checksum(descriptors, algorithm)
    except InvalidArgumentError as exc:
        console.print(f"[bold red]{exc}[/bold red]")
        raise typer.Exit(code=1) from None

    if actual != checksum.strip().lower():
        console.print("[bold red]Checksum mismatch[/bold red]")
        console.print(f"  expected: {checksum}", highlight=False)
        console.print(f"  actual:   {actual}", highlight=False)
        raise typer.Exit(code=1)

    console.print("[bold green]Checksum verified[/bold green]")
