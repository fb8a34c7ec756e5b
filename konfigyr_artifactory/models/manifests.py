"""Service manifest models — what a deployable service depends on."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Iterator
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from konfigyr_artifactory.core.validation import require_text
from konfigyr_artifactory.models.artifacts import Artifact

logger = logging.getLogger(__name__)


class ManifestDiff(BaseModel):
    """Coordinate-exact difference between a manifest and discovered artifacts."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    added: tuple[Artifact, ...] = ()  # discovered, not yet in the manifest
    removed: tuple[Artifact, ...] = ()  # in the manifest, no longer discovered

    @property
    def is_empty(self) -> bool:
        return not self.added and not self.removed


class Manifest(BaseModel):
    """A named, timestamped snapshot of the artifacts a service uses.

    Artifacts are held in coordinate order and may repeat. Both queries are
    linear scans; manifests are small and short-lived.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str
    name: str
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    artifacts: tuple[Artifact, ...] = ()

    @classmethod
    def builder(cls) -> ManifestBuilder:
        return ManifestBuilder()

    def contains(self, artifact: Artifact) -> bool:
        """Whether an entry has exactly the same coordinate."""
        return any(candidate.same_coordinates(artifact) for candidate in self.artifacts)

    def find(self, group_id: str, artifact_id: str) -> Artifact | None:
        """First entry matching group and artifact id, whatever its version.

        Entries are in coordinate order, so with several versions present
        the lexicographically smallest version is returned.
        """
        for artifact in self.artifacts:
            if artifact.group_id == group_id and artifact.artifact_id == artifact_id:
                return artifact
        return None

    def diff(self, discovered: Manifest | Iterable[Artifact]) -> ManifestDiff:
        """Compare this manifest against a freshly discovered artifact set.

        ``added`` holds what needs to be uploaded, ``removed`` what the
        service no longer depends on.
        """
        discovered = list(discovered)
        known = {artifact.coordinates for artifact in self.artifacts}
        found = {artifact.coordinates for artifact in discovered}

        return ManifestDiff(
            added=tuple(sorted(a for a in discovered if a.coordinates not in known)),
            removed=tuple(a for a in self.artifacts if a.coordinates not in found),
        )

    def __iter__(self) -> Iterator[Artifact]:  # type: ignore[override]
        return iter(self.artifacts)

    def __len__(self) -> int:
        return len(self.artifacts)


class ManifestBuilder:
    """Single-use accumulator for a Manifest.

    ``None`` artifacts are skipped; duplicates are kept.
    """

    def __init__(self) -> None:
        self._id: str | None = None
        self._name: str | None = None
        self._created_at: datetime | None = None
        self._artifacts: list[Artifact] = []

    def id(self, id: str | None) -> ManifestBuilder:
        """Identifier of the service this manifest belongs to."""
        self._id = id
        return self

    def name(self, name: str | None) -> ManifestBuilder:
        self._name = name
        return self

    def created_at(self, created_at: datetime | None) -> ManifestBuilder:
        """Snapshot time; defaults to the time of ``build()``."""
        self._created_at = created_at
        return self

    def artifact(self, artifact: Artifact | None) -> ManifestBuilder:
        if artifact is not None:
            self._artifacts.append(artifact)
        return self

    def artifacts(self, artifacts: Iterable[Artifact | None] | None) -> ManifestBuilder:
        if artifacts is not None:
            for artifact in artifacts:
                self.artifact(artifact)
        return self

    def build(self) -> Manifest:
        manifest_id = require_text(self._id, "Service identifier can not be blank")
        name = require_text(self._name, "Service name can not be blank")
        created_at = self._created_at or datetime.now(timezone.utc)

        duplicates = [
            coordinates
            for coordinates, count in Counter(a.coordinates for a in self._artifacts).items()
            if count > 1
        ]
        if duplicates:
            logger.warning(
                "Manifest %s lists %d artifact(s) more than once: %s",
                manifest_id,
                len(duplicates),
                ", ".join(":".join(c) for c in sorted(duplicates)),
            )

        return Manifest(
            id=manifest_id,
            name=name,
            created_at=created_at,
            artifacts=tuple(sorted(self._artifacts)),
        )
