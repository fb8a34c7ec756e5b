"""Exception hierarchy for the artifactory model layer.

Validation and decoding failures prevent a value from existing at all and are
raised immediately. A rejected upload on business grounds is not an error
here: it is a ``Release`` in the ``FAILED`` state.
"""

from __future__ import annotations


class ArtifactoryError(Exception):
    """Base exception for artifactory model operations."""


class InvalidArgumentError(ArtifactoryError, ValueError):
    """Raised by a builder when a required field is missing or blank."""


class MalformedInputError(ArtifactoryError, ValueError):
    """Raised when wire bytes can not be decoded into property descriptors."""
