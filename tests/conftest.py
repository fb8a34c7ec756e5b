"""Shared test fixtures for the artifactory models."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import pytest

from konfigyr_artifactory.models.artifacts import Artifact, ArtifactMetadata
from konfigyr_artifactory.models.properties import (
    DataType,
    PropertyDescriptor,
    PropertyType,
)


@pytest.fixture
def artifact() -> Artifact:
    """Provide an artifact with coordinates only."""
    return Artifact.of("com.konfigyr", "konfigyr-artifactory", "1.0.0")


@pytest.fixture
def release_date() -> datetime:
    """Provide a deterministic release timestamp."""
    return datetime(2025, 10, 23, 12, 0, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Descriptor factories shared across test modules
# ---------------------------------------------------------------------------


@pytest.fixture
def make_descriptor() -> Callable[..., PropertyDescriptor]:
    """Factory fixture: build a PropertyDescriptor with sensible defaults."""

    def _factory(name: str = "test.property", **overrides: Any) -> PropertyDescriptor:
        defaults: dict[str, Any] = {"name": name}
        defaults.update(overrides)
        return PropertyDescriptor(**defaults)

    return _factory


@pytest.fixture
def boolean_descriptor() -> PropertyDescriptor:
    """A descriptor with every optional field populated."""
    return (
        PropertyDescriptor.builder()
        .name("another.property")
        .type(PropertyType.BOOLEAN)
        .data_type(DataType.ATOMIC)
        .type_name("java.lang.Boolean")
        .default_value("true")
        .description("Property description")
        .deprecation("To be removed")
        .hints("true", "false")
        .build()
    )


@pytest.fixture
def make_metadata(
    make_descriptor: Callable[..., PropertyDescriptor],
) -> Callable[..., ArtifactMetadata]:
    """Factory fixture: build ArtifactMetadata holding the named descriptors."""

    def _factory(
        *names: str,
        version: str = "1.0.0",
        checksum: str | None = None,
    ) -> ArtifactMetadata:
        return (
            ArtifactMetadata.builder()
            .group_id("com.konfigyr")
            .artifact_id("konfigyr-artifactory")
            .version(version)
            .checksum(checksum)
            .properties(make_descriptor(n) for n in (names or ("test.property",)))
            .build()
        )

    return _factory
