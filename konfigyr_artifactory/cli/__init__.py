"""Artifactory CLI — Typer-based developer tooling.

Provides the ``konfigyr-artifactory`` command with subcommands to inspect a
component payload, compute its checksum and verify it against a release.

All output uses Rich for formatted terminal display.
"""
