"""Artifact identity and artifact metadata models.

An artifact is any piece of software that can be tweaked through
configuration properties. It is identified by its Maven-style coordinate
``(group_id, artifact_id, version)``; the descriptive fields carry no
identity weight.

The property descriptors are not attached to an artifact directly but to
the metadata of one artifact version, because the set of properties changes
as the software evolves: properties get added, retyped, deprecated or
removed between releases.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict

from konfigyr_artifactory.core.hasher import compute_checksum
from konfigyr_artifactory.core.serializer import encode
from konfigyr_artifactory.core.validation import require_coordinates, to_uri
from konfigyr_artifactory.errors import InvalidArgumentError
from konfigyr_artifactory.models.properties import PropertyDescriptor

logger = logging.getLogger(__name__)


class Artifact(BaseModel):
    """Coordinate and descriptive metadata of a software component.

    Artifacts sort by coordinate. Equality compares every field.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    group_id: str
    artifact_id: str
    version: str
    name: str | None = None
    description: str | None = None
    website: str | None = None  # documentation or homepage URI
    repository: str | None = None  # SCM URI

    @classmethod
    def of(cls, group_id: str, artifact_id: str, version: str) -> Artifact:
        """Create an artifact from its coordinate alone."""
        return ArtifactBuilder().group_id(group_id).artifact_id(artifact_id).version(version).build()

    @classmethod
    def builder(cls) -> ArtifactBuilder:
        return ArtifactBuilder()

    @property
    def coordinates(self) -> tuple[str, str, str]:
        return (self.group_id, self.artifact_id, self.version)

    def same_coordinates(self, other: Artifact) -> bool:
        """Whether both artifacts share a coordinate, ignoring everything else."""
        return self.coordinates == other.coordinates

    def to_metadata(
        self,
        descriptors: Iterable[PropertyDescriptor | None],
        checksum: str | None = None,
    ) -> ArtifactMetadata:
        """Pair this artifact with the property descriptors of its version."""
        return (
            ArtifactMetadata.builder()
            .artifact(self)
            .checksum(checksum)
            .properties(descriptors)
            .build()
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Artifact):
            return NotImplemented
        return self.coordinates < other.coordinates

    def __str__(self) -> str:
        return ":".join(self.coordinates)


class ArtifactBuilder:
    """Single-use accumulator for an Artifact."""

    def __init__(self) -> None:
        self._group_id: str | None = None
        self._artifact_id: str | None = None
        self._version: str | None = None
        self._name: str | None = None
        self._description: str | None = None
        self._website: str | None = None
        self._repository: str | None = None

    def group_id(self, group_id: str | None) -> ArtifactBuilder:
        self._group_id = group_id
        return self

    def artifact_id(self, artifact_id: str | None) -> ArtifactBuilder:
        self._artifact_id = artifact_id
        return self

    def version(self, version: str | None) -> ArtifactBuilder:
        self._version = version
        return self

    def name(self, name: str | None) -> ArtifactBuilder:
        """Human-readable artifact name."""
        self._name = name
        return self

    def description(self, description: str | None) -> ArtifactBuilder:
        self._description = description
        return self

    def website(self, website: str | None) -> ArtifactBuilder:
        self._website = to_uri(website, "website")
        return self

    def repository(self, repository: str | None) -> ArtifactBuilder:
        self._repository = to_uri(repository, "repository")
        return self

    def build(self) -> Artifact:
        group_id, artifact_id, version = require_coordinates(
            self._group_id, self._artifact_id, self._version
        )
        return Artifact(
            group_id=group_id,
            artifact_id=artifact_id,
            version=version,
            name=self._name,
            description=self._description,
            website=self._website,
            repository=self._repository,
        )


class ArtifactMetadata(Artifact):
    """The configuration surface of one artifact version.

    This is the transfer unit from a build plugin to the registry: the
    coordinate, the name-sorted property descriptors and their checksum.
    Iterating yields the descriptors in name order, which is the only
    order retained after building.
    """

    checksum: str | None = None
    properties: tuple[PropertyDescriptor, ...]

    @classmethod
    def of(  # type: ignore[override]
        cls,
        group_id: str,
        artifact_id: str,
        version: str,
        *descriptors: PropertyDescriptor,
    ) -> ArtifactMetadata:
        return (
            cls.builder()
            .group_id(group_id)
            .artifact_id(artifact_id)
            .version(version)
            .properties(descriptors)
            .build()
        )

    @classmethod
    def builder(cls) -> ArtifactMetadataBuilder:  # type: ignore[override]
        return ArtifactMetadataBuilder()

    def artifact(self) -> Artifact:
        """This metadata's coordinate and descriptive fields as a plain Artifact."""
        return Artifact(**artifact_fields(self))

    def get(self, name: str) -> PropertyDescriptor | None:
        """First descriptor with the given name, if any."""
        for descriptor in self.properties:
            if descriptor.name == name:
                return descriptor
        return None

    def serialize(self) -> bytes:
        """Canonical wire bytes of the property descriptors."""
        return encode(self.properties)

    def compute_checksum(self, algorithm: str | None = None) -> str:
        """Recompute the checksum from the descriptors this value holds."""
        return compute_checksum(self.properties, algorithm)

    def verify_checksum(self, algorithm: str | None = None) -> bool:
        """Whether the carried checksum matches the descriptors."""
        return self.checksum is not None and self.checksum == self.compute_checksum(algorithm)

    def __iter__(self) -> Iterator[PropertyDescriptor]:  # type: ignore[override]
        return iter(self.properties)

    def __len__(self) -> int:
        return len(self.properties)


class ArtifactMetadataBuilder:
    """Single-use accumulator for ArtifactMetadata.

    ``None`` descriptors are skipped. Duplicate names are kept; resolving
    clashes is left to the registry.
    """

    def __init__(self) -> None:
        self._artifact = ArtifactBuilder()
        self._checksum: str | None = None
        self._properties: list[PropertyDescriptor] = []

    def artifact(self, artifact: Artifact) -> ArtifactMetadataBuilder:
        """Copy the coordinate and descriptive fields of an artifact."""
        return (
            self.group_id(artifact.group_id)
            .artifact_id(artifact.artifact_id)
            .version(artifact.version)
            .name(artifact.name)
            .description(artifact.description)
            .website(artifact.website)
            .repository(artifact.repository)
        )

    def group_id(self, group_id: str | None) -> ArtifactMetadataBuilder:
        self._artifact.group_id(group_id)
        return self

    def artifact_id(self, artifact_id: str | None) -> ArtifactMetadataBuilder:
        self._artifact.artifact_id(artifact_id)
        return self

    def version(self, version: str | None) -> ArtifactMetadataBuilder:
        self._artifact.version(version)
        return self

    def name(self, name: str | None) -> ArtifactMetadataBuilder:
        self._artifact.name(name)
        return self

    def description(self, description: str | None) -> ArtifactMetadataBuilder:
        self._artifact.description(description)
        return self

    def website(self, website: str | None) -> ArtifactMetadataBuilder:
        self._artifact.website(website)
        return self

    def repository(self, repository: str | None) -> ArtifactMetadataBuilder:
        self._artifact.repository(repository)
        return self

    def checksum(self, checksum: str | None) -> ArtifactMetadataBuilder:
        self._checksum = checksum
        return self

    def property(self, descriptor: PropertyDescriptor | None) -> ArtifactMetadataBuilder:
        if descriptor is not None:
            self._properties.append(descriptor)
        return self

    def properties(
        self, descriptors: Iterable[PropertyDescriptor | None] | None
    ) -> ArtifactMetadataBuilder:
        if descriptors is not None:
            for descriptor in descriptors:
                self.property(descriptor)
        return self

    def build(self) -> ArtifactMetadata:
        artifact = self._artifact.build()
        properties = sort_descriptors(self._properties)

        return ArtifactMetadata(
            **artifact_fields(artifact),
            checksum=self._checksum,
            properties=properties,
        )


def sort_descriptors(descriptors: list[PropertyDescriptor]) -> tuple[PropertyDescriptor, ...]:
    """Require at least one descriptor and return them in canonical order.

    Name clashes are logged, not rejected.
    """
    if not descriptors:
        raise InvalidArgumentError(
            "Artifact metadata must contain at least one property descriptor"
        )

    clashes = [name for name, count in Counter(d.name for d in descriptors).items() if count > 1]
    if clashes:
        logger.warning("Duplicate property descriptor names: %s", ", ".join(sorted(clashes)))

    return tuple(sorted(descriptors))


def artifact_fields(artifact: Artifact) -> dict[str, Any]:
    return {field: getattr(artifact, field) for field in Artifact.model_fields}
