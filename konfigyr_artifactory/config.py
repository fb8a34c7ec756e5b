"""Artifactory model configuration — env-driven.

Reads from a .env file and KONFIGYR_ARTIFACTORY_* environment variables.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class ArtifactorySettings(BaseSettings):
    """Settings shared by builders, the hasher and the CLI.

    Examples
    --------
    Override via environment::

        export KONFIGYR_ARTIFACTORY_LOG_LEVEL=DEBUG
        export KONFIGYR_ARTIFACTORY_CHECKSUM_ALGORITHM=sha512
        export KONFIGYR_ARTIFACTORY_STRICT_DESCRIPTORS=true
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="KONFIGYR_ARTIFACTORY_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Digest used when computing property set checksums
    checksum_algorithm: str = "sha256"

    # Require value schema and type name on every property descriptor
    strict_descriptors: bool = False


# Module-level default, import as `from konfigyr_artifactory.config import settings`
settings = ArtifactorySettings()
