"""Release models — the registry's record of processing one component upload."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime
from enum import Enum

from konfigyr_artifactory.core.hasher import compute_checksum
from konfigyr_artifactory.core.validation import (
    filter_blank,
    is_blank,
    require_present,
    require_text,
)
from konfigyr_artifactory.models.artifacts import Artifact, ArtifactBuilder, artifact_fields
from konfigyr_artifactory.models.properties import PropertyDescriptor

logger = logging.getLogger(__name__)


class ReleaseState(str, Enum):
    """Outcome of processing an upload, assigned once by the registry."""

    PENDING = "PENDING"  # accepted, not yet authoritative
    RELEASED = "RELEASED"
    FAILED = "FAILED"  # rejected on business grounds, see errors


class Release(Artifact):
    """A processed upload of one artifact version.

    The checksum is the integrity bridge between the uploaded property set
    and this record: recomputing it over the persisted descriptors must give
    the same value. A FAILED release is a modeled outcome, not an error;
    its ``errors`` explain why the upload was rejected.

    ``to_metadata`` pairs the released coordinate with its property set.
    """

    state: ReleaseState = ReleaseState.PENDING
    errors: tuple[str, ...] = ()
    checksum: str
    release_date: datetime

    @classmethod
    def of(  # type: ignore[override]
        cls,
        artifact: Artifact,
        checksum: str,
        release_date: datetime,
        state: ReleaseState | str | None = None,
        errors: Iterable[str | None] = (),
    ) -> Release:
        """Record the outcome of processing an upload of ``artifact``."""
        return (
            ReleaseBuilder()
            .artifact(artifact)
            .state(state)
            .errors(errors)
            .checksum(checksum)
            .release_date(release_date)
            .build()
        )

    @classmethod
    def builder(cls) -> ReleaseBuilder:  # type: ignore[override]
        return ReleaseBuilder()

    @property
    def is_authoritative(self) -> bool:
        """Only RELEASED property sets may be served as current."""
        return self.state == ReleaseState.RELEASED

    @property
    def is_failed(self) -> bool:
        return self.state == ReleaseState.FAILED

    def verify(
        self,
        properties: Iterable[PropertyDescriptor],
        algorithm: str | None = None,
    ) -> bool:
        """Recompute the checksum of ``properties`` and compare it to ours.

        Accepts anything iterable over descriptors, including
        ArtifactMetadata and Component values.
        """
        return compute_checksum(properties, algorithm) == self.checksum


class ReleaseBuilder:
    """Single-use accumulator for a Release.

    Errors are appended in insertion order; ``None`` and blank messages are
    skipped and duplicates are kept.
    """

    def __init__(self) -> None:
        self._artifact = ArtifactBuilder()
        self._state: ReleaseState | None = None
        self._checksum: str | None = None
        self._release_date: datetime | None = None
        self._errors: list[str] = []

    def artifact(self, artifact: Artifact) -> ReleaseBuilder:
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

    def group_id(self, group_id: str | None) -> ReleaseBuilder:
        self._artifact.group_id(group_id)
        return self

    def artifact_id(self, artifact_id: str | None) -> ReleaseBuilder:
        self._artifact.artifact_id(artifact_id)
        return self

    def version(self, version: str | None) -> ReleaseBuilder:
        self._artifact.version(version)
        return self

    def name(self, name: str | None) -> ReleaseBuilder:
        self._artifact.name(name)
        return self

    def description(self, description: str | None) -> ReleaseBuilder:
        self._artifact.description(description)
        return self

    def website(self, website: str | None) -> ReleaseBuilder:
        self._artifact.website(website)
        return self

    def repository(self, repository: str | None) -> ReleaseBuilder:
        self._artifact.repository(repository)
        return self

    def state(self, state: ReleaseState | str | None) -> ReleaseBuilder:
        self._state = ReleaseState(state) if state is not None else None
        return self

    def error(self, error: str | None) -> ReleaseBuilder:
        if not is_blank(error):
            self._errors.append(error)  # type: ignore[arg-type]
        return self

    def errors(self, errors: Iterable[str | None] | None) -> ReleaseBuilder:
        self._errors.extend(filter_blank(errors))
        return self

    def checksum(self, checksum: str | None) -> ReleaseBuilder:
        """Checksum of the artifact metadata this release was produced from."""
        self._checksum = checksum
        return self

    def release_date(self, release_date: datetime | None) -> ReleaseBuilder:
        """When processing completed. There is no default."""
        self._release_date = release_date
        return self

    def build(self) -> Release:
        artifact = self._artifact.build()
        state = self._state or ReleaseState.PENDING
        checksum = require_text(self._checksum, "Release checksum can not be blank")
        release_date = require_present(
            self._release_date, "Artifact release date can not be null"
        )

        if state == ReleaseState.FAILED and not self._errors:
            logger.warning("Release %s is FAILED without any error messages", artifact)

        return Release(
            **artifact_fields(artifact),
            state=state,
            errors=tuple(self._errors),
            checksum=checksum,
            release_date=release_date,
        )
