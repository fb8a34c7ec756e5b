"""Semantic version parsing for component uploads.

Version string format (semver 2.0)::

    {major}.{minor}.{patch}[-{pre_release}][+{build}]

Example:
    1.0.0-RC2+build.17
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

from konfigyr_artifactory.errors import InvalidArgumentError

VERSION_PATTERN = re.compile(
    r"^"
    r"(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<pre_release>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<build>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
    r"$"
)


class SemanticVersion(BaseModel):
    """Parsed semantic version.

    Ordering follows semver precedence: build metadata is ignored and a
    pre-release sorts before the matching release. Equality is structural,
    so two versions differing only in build metadata are not equal even
    though neither precedes the other.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    major: int
    minor: int
    patch: int
    pre_release: str | None = None
    build: str | None = None

    @classmethod
    def parse(cls, version: str) -> SemanticVersion:
        """Parse a version string.

        Raises:
            InvalidArgumentError: If the string is not a semantic version.
        """
        match = VERSION_PATTERN.match(version.strip()) if version else None
        if match is None:
            raise InvalidArgumentError(f"Invalid semantic version: {version!r}")

        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            pre_release=match.group("pre_release"),
            build=match.group("build"),
        )

    @property
    def is_pre_release(self) -> bool:
        return self.pre_release is not None

    def _precedence(self) -> tuple:
        if self.pre_release is None:
            # a release outranks any of its pre-releases
            identifiers: tuple = ((2, 0, ""),)
        else:
            identifiers = tuple(
                (0, int(part), "") if part.isdigit() else (1, 0, part)
                for part in self.pre_release.split(".")
            )
        return (self.major, self.minor, self.patch, identifiers)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._precedence() < other._precedence()

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            text += f"-{self.pre_release}"
        if self.build:
            text += f"+{self.build}"
        return text
