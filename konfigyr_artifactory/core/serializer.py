"""Canonical JSON codec for property descriptor sequences.

The body of a component upload is a JSON array of descriptor objects, in
the order of the in-memory sequence. Optional scalars are omitted when
unset, ``hints`` is always present, unknown keys fail the decode.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import IO

from pydantic import TypeAdapter, ValidationError

from konfigyr_artifactory.errors import MalformedInputError
from konfigyr_artifactory.models.properties import PropertyDescriptor

logger = logging.getLogger(__name__)

_DESCRIPTORS = TypeAdapter(list[PropertyDescriptor])


def encode(descriptors: Iterable[PropertyDescriptor]) -> bytes:
    """Encode descriptors to compact JSON bytes, preserving their order."""
    return _DESCRIPTORS.dump_json(list(descriptors), by_alias=True, exclude_none=True)


def decode(data: bytes | bytearray | str | IO[bytes]) -> list[PropertyDescriptor]:
    """Decode and validate a JSON array of descriptors.

    Raises
    ------
    MalformedInputError
        If the input is not valid JSON, has an unknown key, or does not
        describe a list of valid descriptors. The error carries no cause.
    """
    if hasattr(data, "read"):
        data = data.read()  # type: ignore[union-attr]

    try:
        descriptors = _DESCRIPTORS.validate_json(data)  # type: ignore[arg-type]
    except ValidationError as exc:
        message = _describe(exc)
    else:
        logger.debug("Decoded %d property descriptors", len(descriptors))
        return descriptors

    raise MalformedInputError(message) from None


def _describe(exc: ValidationError) -> str:
    """Turn the first pydantic error into a short decode failure message."""
    error = exc.errors()[0]
    if error["type"] == "json_invalid":
        return "Malformed input"

    location = ".".join(str(part) for part in error["loc"])
    if error["type"] == "extra_forbidden":
        return f"Malformed input: unknown property descriptor field '{location}'"
    return f"Malformed input: {location}: {error['msg']}"
