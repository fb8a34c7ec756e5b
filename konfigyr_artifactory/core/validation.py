"""Shared construction checks applied by every concrete builder.

Checks run one at a time and the first failure wins.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urlsplit

from konfigyr_artifactory.errors import InvalidArgumentError


def is_blank(value: str | None) -> bool:
    """Whether the value is ``None``, empty or whitespace only."""
    return value is None or not value.strip()


def require_text(value: str | None, message: str) -> str:
    """Return ``value`` or raise ``InvalidArgumentError`` when it is blank."""
    if is_blank(value):
        raise InvalidArgumentError(message)
    return value  # type: ignore[return-value]


def require_present(value: Any, message: str) -> Any:
    if value is None:
        raise InvalidArgumentError(message)
    return value


def require_coordinates(
    group_id: str | None, artifact_id: str | None, version: str | None
) -> tuple[str, str, str]:
    """Validate an artifact coordinate.

    Any non-blank string is accepted; the version is not checked for
    semantic version syntax here.
    """
    return (
        require_text(group_id, "Artifact groupId can not be blank"),
        require_text(artifact_id, "Artifact artifactId can not be blank"),
        require_text(version, "Artifact version can not be blank"),
    )


def to_uri(value: str | None, field: str) -> str | None:
    """Check that ``value`` parses as a URI reference, keeping it verbatim."""
    if value is None:
        return None
    try:
        urlsplit(value)
    except ValueError as exc:
        raise InvalidArgumentError(f"Artifact {field} is not a valid URI: {value!r}") from exc
    if any(ch.isspace() for ch in value):
        raise InvalidArgumentError(f"Artifact {field} is not a valid URI: {value!r}")
    return value


def filter_blank(values: Any) -> list[str]:
    """Drop ``None`` and blank entries, keeping order and duplicates."""
    if values is None:
        return []
    return [v for v in values if not is_blank(v)]
