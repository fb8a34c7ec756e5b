"""Checksum helpers binding a property set to the release it produced.

The checksum is the hex digest of the canonical encoding of the
name-sorted descriptors, so producer and registry compute the same value
regardless of the order the descriptors were supplied in.
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Iterable

from konfigyr_artifactory.config import settings
from konfigyr_artifactory.core.serializer import encode
from konfigyr_artifactory.errors import InvalidArgumentError
from konfigyr_artifactory.models.properties import PropertyDescriptor

logger = logging.getLogger(__name__)


def digest_hex(data: bytes, algorithm: str | None = None) -> str:
    """Return the hex digest of raw bytes with the configured algorithm."""
    algorithm = algorithm or settings.checksum_algorithm
    try:
        hasher = hashlib.new(algorithm)
    except ValueError:
        raise InvalidArgumentError(f"Unsupported checksum algorithm: {algorithm}") from None
    hasher.update(data)
    return hasher.hexdigest()


def compute_checksum(
    descriptors: Iterable[PropertyDescriptor], algorithm: str | None = None
) -> str:
    """Checksum of a property set over its canonical (name-sorted) encoding.

    Descriptors sharing a name are ordered by their own encoding.
    """
    payload = encode(sorted(descriptors, key=_canonical_key))
    checksum = digest_hex(payload, algorithm)
    logger.debug("Computed checksum %s over %d bytes", checksum, len(payload))
    return checksum


def _canonical_key(descriptor: PropertyDescriptor) -> tuple[str, str]:
    return (descriptor.name, descriptor.model_dump_json(by_alias=True, exclude_none=True))
