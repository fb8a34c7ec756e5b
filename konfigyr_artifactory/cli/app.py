"""Main Typer application — imports and registers all CLI commands.

Entry point: ``konfigyr-artifactory`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging

import typer

from konfigyr_artifactory.cli.commands.checksum import checksum_cmd
from konfigyr_artifactory.cli.commands.inspect import inspect_cmd
from konfigyr_artifactory.cli.commands.verify import verify_cmd
from konfigyr_artifactory.config import settings

app = typer.Typer(
    name="konfigyr-artifactory",
    help="Konfigyr Artifactory: inspect and verify component payloads.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def configure(
    log_level: str = typer.Option(
        None, "--log-level", help="Logging level, defaults to the configured one."
    ),
) -> None:
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
app.command(name="inspect", help="List the property descriptors of a payload.")(inspect_cmd)
app.command(name="checksum", help="Compute the checksum of a payload.")(checksum_cmd)
app.command(name="verify", help="Verify a payload against a release checksum.")(verify_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
