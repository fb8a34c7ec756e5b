"""Artifactory value models — all Pydantic v2, all frozen (immutable)."""

from konfigyr_artifactory.models.properties import (
    DataType,
    Deprecation,
    PropertyDescriptor,
    PropertyDescriptorBuilder,
    PropertyType,
)
from konfigyr_artifactory.models.artifacts import (
    Artifact,
    ArtifactBuilder,
    ArtifactMetadata,
    ArtifactMetadataBuilder,
)
from konfigyr_artifactory.models.releases import Release, ReleaseBuilder, ReleaseState
from konfigyr_artifactory.models.manifests import Manifest, ManifestBuilder, ManifestDiff
from konfigyr_artifactory.models.versioning import SemanticVersion
from konfigyr_artifactory.models.components import Component

__all__ = [
    # properties
    "PropertyType",
    "DataType",
    "Deprecation",
    "PropertyDescriptor",
    "PropertyDescriptorBuilder",
    # artifacts
    "Artifact",
    "ArtifactBuilder",
    "ArtifactMetadata",
    "ArtifactMetadataBuilder",
    # releases
    "ReleaseState",
    "Release",
    "ReleaseBuilder",
    # manifests
    "Manifest",
    "ManifestBuilder",
    "ManifestDiff",
    # components
    "SemanticVersion",
    "Component",
]
