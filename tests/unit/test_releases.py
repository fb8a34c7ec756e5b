"""Tests for Release — builder defaults, validation and checksum verification."""

from __future__ import annotations

import logging
from datetime import datetime

import pytest

from konfigyr_artifactory.core.hasher import compute_checksum
from konfigyr_artifactory.errors import InvalidArgumentError
from konfigyr_artifactory.models.artifacts import Artifact
from konfigyr_artifactory.models.components import Component
from konfigyr_artifactory.models.properties import PropertyDescriptor
from konfigyr_artifactory.models.releases import Release, ReleaseState


class TestReleaseBuilder:
    def test_defaults_state_to_pending(self, artifact: Artifact, release_date: datetime):
        release = Release.builder().artifact(artifact).checksum("abc").release_date(release_date).build()
        assert release.state == ReleaseState.PENDING
        assert release.errors == ()
        assert release.release_date == release_date
        assert release.is_authoritative is False

    def test_validation_order(self, release_date: datetime):
        builder = Release.builder()

        with pytest.raises(InvalidArgumentError, match="groupId can not be blank"):
            builder.build()

        builder.group_id("com.konfigyr").artifact_id("konfigyr-artifactory")
        with pytest.raises(InvalidArgumentError, match="version can not be blank"):
            builder.build()

        builder.version("1.0.0")
        with pytest.raises(InvalidArgumentError, match="checksum can not be blank"):
            builder.build()

        builder.checksum("  ")
        with pytest.raises(InvalidArgumentError, match="checksum can not be blank"):
            builder.build()

        builder.checksum("abc")
        with pytest.raises(InvalidArgumentError, match="release date can not be null"):
            builder.build()

        assert builder.release_date(release_date).build().checksum == "abc"

    def test_released_state(self, artifact: Artifact, release_date: datetime):
        release = (
            Release.builder()
            .artifact(artifact)
            .state(ReleaseState.RELEASED)
            .checksum("abc")
            .release_date(release_date)
            .build()
        )
        assert release.is_authoritative is True
        assert release.is_failed is False

    def test_state_from_wire_name(self, artifact: Artifact, release_date: datetime):
        release = Release.builder().artifact(artifact).state("FAILED").error("x").checksum("abc").release_date(
            release_date
        ).build()
        assert release.state == ReleaseState.FAILED

    def test_errors_filter_blanks_keep_order_and_duplicates(self, artifact: Artifact, release_date: datetime):
        release = (
            Release.builder()
            .artifact(artifact)
            .state(ReleaseState.FAILED)
            .error("Duplicate property: server.port")
            .error(None)
            .error(" ")
            .errors(["Invalid schema", "", None, "Duplicate property: server.port"])
            .checksum("abc")
            .release_date(release_date)
            .build()
        )
        assert release.errors == (
            "Duplicate property: server.port",
            "Invalid schema",
            "Duplicate property: server.port",
        )
        assert release.is_failed is True

    def test_errors_are_read_only(self, artifact: Artifact, release_date: datetime):
        release = Release.builder().artifact(artifact).error("x").checksum("abc").release_date(release_date).build()
        assert isinstance(release.errors, tuple)

    def test_failed_without_errors_is_allowed_but_logged(
        self, artifact: Artifact, release_date: datetime, caplog
    ):
        with caplog.at_level(logging.WARNING):
            release = (
                Release.builder()
                .artifact(artifact)
                .state(ReleaseState.FAILED)
                .checksum("abc")
                .release_date(release_date)
                .build()
            )
        assert release.errors == ()
        assert "FAILED without any error messages" in caplog.text

    def test_artifact_shortcut_copies_descriptive_fields(self, release_date: datetime):
        artifact = Artifact.builder().group_id("g").artifact_id("a").version("1").name("Name").website(
            "https://konfigyr.com"
        ).build()
        release = Release.builder().artifact(artifact).checksum("abc").release_date(release_date).build()
        assert release.name == "Name"
        assert release.website == "https://konfigyr.com"
        assert release.same_coordinates(artifact)

    def test_release_is_an_artifact(self, artifact: Artifact, release_date: datetime):
        release = Release.builder().artifact(artifact).checksum("abc").release_date(release_date).build()
        assert isinstance(release, Artifact)
        assert str(release) == str(artifact)

    def test_of_builds_a_release(self, artifact: Artifact, release_date: datetime):
        release = Release.of(artifact, "abc", release_date, "FAILED", ["Duplicate version", None])
        assert type(release) is Release
        assert release.same_coordinates(artifact)
        assert release.state == ReleaseState.FAILED
        assert release.errors == ("Duplicate version",)
        assert release.checksum == "abc"

    def test_of_validates_like_builder(self, artifact: Artifact, release_date: datetime):
        with pytest.raises(InvalidArgumentError, match="Release checksum can not be blank"):
            Release.of(artifact, " ", release_date)


class TestReleaseVerification:
    def test_verify_metadata(self, make_metadata, release_date: datetime):
        metadata = make_metadata("b", "a")
        release = (
            Release.builder()
            .artifact(metadata)
            .state(ReleaseState.RELEASED)
            .checksum(metadata.compute_checksum())
            .release_date(release_date)
            .build()
        )
        assert release.verify(metadata) is True
        assert release.verify(make_metadata("a")) is False

    def test_verify_is_order_independent(self, artifact: Artifact, release_date: datetime):
        a, b = PropertyDescriptor(name="a"), PropertyDescriptor(name="b")
        release = Release.builder().artifact(artifact).checksum(compute_checksum([a, b])).release_date(
            release_date
        ).build()
        assert release.verify([b, a]) is True

    def test_verify_component(self, artifact: Artifact, release_date: datetime):
        component = Component.of("1.0.0", True, [PropertyDescriptor(name="a")])
        release = Release.builder().artifact(artifact).checksum(component.checksum()).release_date(
            release_date
        ).build()
        assert release.verify(component) is True

    def test_detects_tampered_descriptor(self, artifact: Artifact, release_date: datetime):
        original = [PropertyDescriptor(name="server.port", default_value="8080")]
        tampered = [PropertyDescriptor(name="server.port", default_value="80")]
        release = Release.builder().artifact(artifact).checksum(compute_checksum(original)).release_date(
            release_date
        ).build()
        assert release.verify(tampered) is False
