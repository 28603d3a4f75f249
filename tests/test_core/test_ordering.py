"""Unit tests for verbump.core.ordering."""

from __future__ import annotations

import pytest

from verbump.core.ordering import compare, max_version, validate_next
from verbump.exceptions import (
    InvalidPrereleaseNumberError,
    InvalidVersionError,
    VersionRegressionError,
)


@pytest.mark.unit
class TestCompare:
    """Tests for compare."""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("1.2.3", "1.2.4", -1),
            ("1.2.4", "1.2.3", 1),
            ("1.2.3", "1.2.3", 0),
            ("1.2.4-alpha", "1.2.4", -1),
            ("1.2.4-alpha", "1.2.4-beta", -1),
            ("1.2.4-rc.2", "1.2.4-rc.10", -1),
            ("1.2", "1.2.0", 0),
            ("1.2.3+build.1", "1.2.3+build.2", 0),
            ("2.0.0", "10.0.0", -1),
        ],
    )
    def test_precedence(self, a: str, b: str, expected: int) -> None:
        """Test SemVer 2.0.0 precedence rules."""
        assert compare(a, b) == expected

    @pytest.mark.parametrize(
        "a, b",
        [("v1.2.3", "1.2.3"), ("1.2.3", "v1.2.3"), ("abc", "1.2.3"), ("1.2.3", "")],
    )
    def test_invalid_versions(self, a: str, b: str) -> None:
        """Test invalid or v-prefixed versions cannot be compared."""
        with pytest.raises(InvalidVersionError):
            compare(a, b)


@pytest.mark.unit
class TestMaxVersion:
    """Tests for max_version."""

    @pytest.mark.parametrize(
        "versions, expected",
        [
            ((), ""),
            (("1.2.3",), "1.2.3"),
            (("1.2.3", "1.2.4", "1.2.2"), "1.2.4"),
            (("1.2.4", "1.2.4-alpha", "1.2.4-beta"), "1.2.4"),
        ],
        ids=["empty", "single", "multiple", "multiple-with-prerelease"],
    )
    def test_max_version(self, versions, expected: str) -> None:
        """Test the largest version is returned."""
        assert max_version(*versions) == expected

    def test_invalid_candidates_are_skipped(self) -> None:
        """Test invalid and v-prefixed candidates never win."""
        assert max_version("v9.9.9", "garbage", "1.0.0") == "1.0.0"

    def test_no_valid_candidates(self) -> None:
        """Test the empty string is returned when nothing is valid."""
        assert max_version("v1.0.0", "garbage") == ""

    def test_original_string_is_returned(self) -> None:
        """Test the winner is returned as given, not canonicalized."""
        assert max_version("1.0.0", "1.1") == "1.1"

    def test_equal_precedence_picks_lexically_largest(self) -> None:
        """Test ties between equal versions are broken by the raw string."""
        assert max_version("1.2.3+a", "1.2.3+b", "1.2.3") == "1.2.3+b"


@pytest.mark.unit
class TestValidateNext:
    """Tests for validate_next."""

    def test_valid_next_version(self) -> None:
        """Test a later version is accepted."""
        validate_next("1.2.3", "1.2.4")

    def test_first_release(self) -> None:
        """Test any valid version is accepted without a current version."""
        validate_next("", "1.2.3")

    def test_prerelease_to_release(self) -> None:
        """Test a release follows its own prereleases."""
        validate_next("2.0.0-rc.3", "2.0.0")

    def test_invalid_next_version(self) -> None:
        """Test an invalid next version is rejected."""
        with pytest.raises(InvalidVersionError):
            validate_next("", "invalid")

    def test_invalid_current_version(self) -> None:
        """Test an invalid current version is rejected."""
        with pytest.raises(InvalidVersionError) as exc_info:
            validate_next("invalid", "1.2.3")

        assert exc_info.value.version == "invalid"

    def test_invalid_prerelease_number(self) -> None:
        """Test a non-numeric dotted prerelease number is rejected."""
        with pytest.raises(InvalidPrereleaseNumberError):
            validate_next("1.2.3", "1.3.0-rc.abc")

    def test_earlier_version(self) -> None:
        """Test a version before the current one is rejected."""
        with pytest.raises(VersionRegressionError) as exc_info:
            validate_next("1.3.0", "1.2.0")

        assert exc_info.value.current_version == "1.3.0"
        assert exc_info.value.version == "1.2.0"
        assert "must be greater than" in str(exc_info.value)

    def test_equal_version(self) -> None:
        """Test re-releasing the current version is rejected."""
        with pytest.raises(VersionRegressionError):
            validate_next("1.2.3", "1.2.3")

    def test_equal_after_canonicalization(self) -> None:
        """Test shorthand for the current version is also rejected."""
        with pytest.raises(VersionRegressionError):
            validate_next("1.2.0", "1.2")
