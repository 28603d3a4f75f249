"""Unit tests for verbump.models.version module.

Test Coverage:
- Stringification of releases and SemVer 1.0.0 / 2.0.0 prereleases
- Zero padding of SemVer 1.0.0 prerelease numbers
- ``v`` prefix and version-core-only rendering
- JSON serialization
- Immutability and derived properties
"""

from __future__ import annotations

import json
from dataclasses import FrozenInstanceError, replace

import pytest

from verbump.constants import SEMVER_SPEC_V1, SEMVER_SPEC_V2
from verbump.models.version import Version


@pytest.mark.unit
class TestVersionToString:
    """Tests for Version.to_string and __str__."""

    @pytest.mark.parametrize(
        "version, expected",
        [
            (Version(major=1, minor=2, patch=3), "1.2.3"),
            (
                Version(
                    major=1,
                    minor=2,
                    patch=3,
                    prerelease="alpha",
                    prerelease_separator=".",
                    prerelease_number=1,
                ),
                "1.2.3-alpha.1",
            ),
            (
                Version(
                    major=1,
                    minor=2,
                    patch=3,
                    prerelease="beta",
                    prerelease_number=21,
                    spec_version=SEMVER_SPEC_V1,
                ),
                "1.2.3-beta21",
            ),
            (
                Version(
                    major=1,
                    minor=2,
                    patch=3,
                    prerelease="beta",
                    prerelease_number=2,
                    spec_version=SEMVER_SPEC_V1,
                ),
                "1.2.3-beta02",
            ),
            (Version(major=1, minor=2, patch=3, prerelease="beta"), "1.2.3-beta"),
        ],
        ids=[
            "simple",
            "dotted-prerelease",
            "semver1-prerelease",
            "semver1-zero-padded",
            "prerelease-without-number",
        ],
    )
    def test_to_string(self, version: Version, expected: str) -> None:
        """Test each prerelease notation renders as expected."""
        assert version.to_string() == expected
        assert str(version) == expected

    def test_semver2_number_is_not_padded(self) -> None:
        """Test SemVer 2.0.0 numbers are written verbatim."""
        version = Version(
            major=1,
            prerelease="rc",
            prerelease_separator=".",
            prerelease_number=2,
            spec_version=SEMVER_SPEC_V2,
        )

        assert str(version) == "1.0.0-rc.2"

    def test_zero_number_is_rendered(self) -> None:
        """Test a prerelease number of zero is not dropped."""
        version = Version(prerelease="rc", prerelease_separator=".", prerelease_number=0)

        assert str(version) == "0.0.0-rc.0"

    def test_include_v_prefix(self) -> None:
        """Test the v prefix is added on request."""
        version = Version(major=2, prerelease="rc", prerelease_separator=".", prerelease_number=1)

        assert version.to_string(include_v_prefix=True) == "v2.0.0-rc.1"

    def test_version_core_only(self) -> None:
        """Test the prerelease is omitted for version-core-only output."""
        version = Version(major=2, prerelease="rc", prerelease_separator=".", prerelease_number=1)

        assert version.to_string(version_core_only=True) == "2.0.0"
        assert version.to_string(include_v_prefix=True, version_core_only=True) == "v2.0.0"

    def test_default_version(self) -> None:
        """Test the default value renders as 0.0.0."""
        assert str(Version()) == "0.0.0"


@pytest.mark.unit
class TestVersionProperties:
    """Tests for derived properties and immutability."""

    def test_is_prerelease(self) -> None:
        """Test is_prerelease follows the label."""
        assert Version(prerelease="rc").is_prerelease is True
        assert Version(major=1).is_prerelease is False

    def test_core(self) -> None:
        """Test core returns a comparable tuple."""
        assert Version(major=1, minor=2, patch=3).core == (1, 2, 3)
        assert Version(major=1, minor=10).core > Version(major=1, minor=9, patch=99).core

    def test_frozen(self) -> None:
        """Test fields cannot be reassigned."""
        version = Version(major=1)

        with pytest.raises(FrozenInstanceError):
            version.major = 2  # type: ignore[misc]

    def test_replace_creates_new_value(self) -> None:
        """Test dataclasses.replace leaves the original untouched."""
        version = Version(major=1, minor=2, patch=3)
        bumped = replace(version, patch=4)

        assert str(version) == "1.2.3"
        assert str(bumped) == "1.2.4"

    def test_equality(self) -> None:
        """Test versions with equal fields are equal."""
        assert Version(major=1, prerelease="rc") == Version(major=1, prerelease="rc")
        assert Version(major=1) != Version(major=1, spec_version=SEMVER_SPEC_V1)


@pytest.mark.unit
class TestVersionToJson:
    """Tests for Version.to_json."""

    def test_release(self) -> None:
        """Test empty prerelease fields serialize as None."""
        data = Version(major=1, minor=2, patch=3).to_json()

        assert data == {
            "version": "1.2.3",
            "major": 1,
            "minor": 2,
            "patch": 3,
            "prerelease": None,
            "prerelease_separator": None,
            "prerelease_number": None,
            "spec_version": "2.0.0",
        }

    def test_semver1_prerelease(self) -> None:
        """Test a SemVer 1.0.0 prerelease keeps its padded string form."""
        data = Version(
            major=1,
            prerelease="beta",
            prerelease_number=3,
            spec_version=SEMVER_SPEC_V1,
        ).to_json()

        assert data["version"] == "1.0.0-beta03"
        assert data["prerelease"] == "beta"
        assert data["prerelease_number"] == 3
        assert data["spec_version"] == "1.0.0"

    def test_is_json_serializable(self) -> None:
        """Test the dictionary can be dumped as JSON."""
        version = Version(major=1, prerelease="rc", prerelease_separator=".", prerelease_number=1)

        assert json.loads(json.dumps(version.to_json()))["version"] == "1.0.0-rc.1"
