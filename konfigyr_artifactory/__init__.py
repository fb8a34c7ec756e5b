"""Konfigyr Artifactory: the building blocks of the configuration registry.

Immutable, validated value types exchanged between build tooling and the
registry:
  - Artifact coordinates and their per-version property metadata
  - Property descriptors with a strict, canonical JSON wire format
  - Releases that bind an uploaded property set to its checksum
  - Service manifests with containment, lookup and diff queries
"""

__version__ = "1.0.0"
__description__ = "Value model and wire format of the Konfigyr Artifactory"

from konfigyr_artifactory.errors import (
    ArtifactoryError,
    InvalidArgumentError,
    MalformedInputError,
)
from konfigyr_artifactory.models import (
    Artifact,
    ArtifactMetadata,
    Component,
    DataType,
    Deprecation,
    Manifest,
    ManifestDiff,
    PropertyDescriptor,
    PropertyType,
    Release,
    ReleaseState,
    SemanticVersion,
)
from konfigyr_artifactory.core.hasher import compute_checksum
from konfigyr_artifactory.core.serializer import decode, encode

__all__ = [
    "Artifact",
    "ArtifactMetadata",
    "Component",
    "DataType",
    "Deprecation",
    "Manifest",
    "ManifestDiff",
    "PropertyDescriptor",
    "PropertyType",
    "Release",
    "ReleaseState",
    "SemanticVersion",
    "ArtifactoryError",
    "InvalidArgumentError",
    "MalformedInputError",
    "compute_checksum",
    "decode",
    "encode",
    "__version__",
]
