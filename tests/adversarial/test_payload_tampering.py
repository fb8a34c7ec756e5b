"""Adversarial tests: hostile or corrupted upload payloads.

A registry must reject payloads it does not fully understand and detect
property sets that no longer match the checksum of their release.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from konfigyr_artifactory.core.serializer import decode, encode
from konfigyr_artifactory.errors import InvalidArgumentError, MalformedInputError
from konfigyr_artifactory.models.artifacts import Artifact
from konfigyr_artifactory.models.components import Component
from konfigyr_artifactory.models.properties import PropertyDescriptor
from konfigyr_artifactory.models.releases import Release, ReleaseState


def _release_for(component: Component) -> Release:
    return (
        Release.builder()
        .artifact(Artifact.of("com.konfigyr", "konfigyr-artifactory", str(component.version)))
        .state(ReleaseState.RELEASED)
        .checksum(component.checksum())
        .release_date(datetime.now(timezone.utc))
        .build()
    )


class TestStrictDecoding:
    @pytest.mark.parametrize(
        "payload",
        [
            b"",
            b"null",
            b"[",
            b"[{]",
            b'[{"name":"p"},]',
            b"\xff\xfe",
        ],
    )
    def test_malformed_bytes(self, payload):
        with pytest.raises(MalformedInputError):
            decode(payload)

    def test_future_field_is_rejected(self):
        future = b'[{"name":"p","type":"STRING","data_type":"ATOMIC","hints":[],"since":"2.0.0"}]'
        with pytest.raises(MalformedInputError, match="since"):
            decode(future)

    def test_in_memory_field_name_is_rejected(self):
        with pytest.raises(MalformedInputError, match="value_schema"):
            decode(b'[{"name":"p","value_schema":"{}"}]')

    def test_non_string_hint_is_malformed(self):
        with pytest.raises(MalformedInputError, match="hints"):
            decode(b'[{"name":"p","hints":["a",1]}]')

    @pytest.mark.parametrize(
        "payload",
        [
            b'[{"name":1}]',
            b'[{"name":"p","hints":"a"}]',
            b'[{"name":"p","hints":[1]}]',
            b'[{"name":"p","deprecation":"soon"}]',
            b'["p"]',
        ],
    )
    def test_wrong_shapes(self, payload):
        with pytest.raises(MalformedInputError):
            decode(payload)

    def test_no_partial_result(self):
        payload = b'[{"name":"good"},{"name":"bad","extra":true}]'
        with pytest.raises(MalformedInputError):
            Component.from_bytes("1.0.0", True, payload)


class TestChecksumTampering:
    def test_modified_default_value(self):
        component = Component.of("1.0.0", True, [PropertyDescriptor(name="server.port", default_value="8080")])
        release = _release_for(component)

        body = json.loads(component.serialize())
        body[0]["default_value"] = "80"
        tampered = Component.from_bytes("1.0.0", True, json.dumps(body).encode())

        assert release.verify(component) is True
        assert release.verify(tampered) is False

    def test_dropped_descriptor(self):
        component = Component.of("1.0.0", True, [PropertyDescriptor(name="a"), PropertyDescriptor(name="b")])
        release = _release_for(component)

        partial = Component.from_bytes("1.0.0", True, encode(component.properties[:1]))
        assert release.verify(partial) is False

    def test_reordered_payload_still_verifies(self):
        component = Component.of("1.0.0", True, [PropertyDescriptor(name="a"), PropertyDescriptor(name="b")])
        release = _release_for(component)

        reordered = Component.from_bytes("1.0.0", True, encode(reversed(component.properties)))
        assert release.verify(reordered) is True

    def test_whitespace_name_is_rejected(self):
        with pytest.raises(MalformedInputError):
            decode(b'[{"name":"\\t"}]')

    def test_blank_version_is_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Component.from_bytes("  ", True, b'[{"name":"p"}]')
