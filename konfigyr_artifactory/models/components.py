"""Component — the upload unit a registry receives from a build plugin."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import IO

from pydantic import BaseModel, ConfigDict

from konfigyr_artifactory.core.hasher import compute_checksum
from konfigyr_artifactory.core.serializer import decode, encode
from konfigyr_artifactory.models.artifacts import sort_descriptors
from konfigyr_artifactory.models.properties import PropertyDescriptor
from konfigyr_artifactory.models.versioning import SemanticVersion

logger = logging.getLogger(__name__)


class Component(BaseModel):
    """A versioned set of property descriptors as uploaded.

    The descriptors are validated like artifact metadata: at least one is
    required and they are held in name order. Components order by version
    precedence.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: SemanticVersion
    latest: bool = False
    properties: tuple[PropertyDescriptor, ...]

    @classmethod
    def of(
        cls,
        version: SemanticVersion | str,
        latest: bool,
        properties: Iterable[PropertyDescriptor | None],
    ) -> Component:
        if not isinstance(version, SemanticVersion):
            version = SemanticVersion.parse(version)
        descriptors = [d for d in properties if d is not None]
        return cls(version=version, latest=latest, properties=sort_descriptors(descriptors))

    @classmethod
    def from_bytes(
        cls, version: SemanticVersion | str, latest: bool, data: bytes | str
    ) -> Component:
        """Decode an upload body and validate it into a component.

        Raises:
            MalformedInputError: If the body can not be decoded.
            InvalidArgumentError: If the version or descriptors are invalid.
        """
        if not isinstance(version, SemanticVersion):
            version = SemanticVersion.parse(version)
        descriptors = decode(data)
        logger.debug("Received component %s with %d descriptors", version, len(descriptors))
        return cls.of(version, latest, descriptors)

    @classmethod
    def from_stream(
        cls, version: SemanticVersion | str, latest: bool, stream: IO[bytes]
    ) -> Component:
        return cls.from_bytes(version, latest, stream.read())

    def serialize(self) -> bytes:
        """Canonical wire bytes of the descriptors, in name order."""
        return encode(self.properties)

    def checksum(self, algorithm: str | None = None) -> str:
        return compute_checksum(self.properties, algorithm)

    def __iter__(self) -> Iterator[PropertyDescriptor]:  # type: ignore[override]
        return iter(self.properties)

    def __len__(self) -> int:
        return len(self.properties)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Component):
            return NotImplemented
        return self.version < other.version
