"""``konfigyr-artifactory inspect PAYLOAD`` — tabulate a component payload."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from konfigyr_artifactory.cli.commands._payload import load_payload

console = Console()


def inspect_cmd(
    payload: Path = typer.Argument(..., help="Path to a component payload (JSON)."),
) -> None:
    """Decode a payload and print its descriptors in name order."""
    descriptors = sorted(load_payload(payload, console))

    table = Table(title=f"{payload.name} ({len(descriptors)} properties)")
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="green")
    table.add_column("Data type")
    table.add_column("Default")
    table.add_column("Hints")
    table.add_column("Deprecated", justify="center")

    for d in descriptors:
        deprecated = "[yellow]Yes[/yellow]" if d.is_deprecated else ""
        table.add_row(
            d.name,
            d.type.value,
            d.data_type.value,
            d.default_value or "",
            ", ".join(d.hints),
            deprecated,
        )

    console.print(table)
