"""
Version data model for verbump.

This module defines the structured representation of a parsed SemVer
version string. Values are produced by :func:`verbump.core.parser.parse`
and never mutated afterwards; derivation builds new values with
:func:`dataclasses.replace`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from verbump.constants import (
    SEMVER_SPEC_V1,
    SEMVER_SPEC_V2,
    SEMVER_V1_PRERELEASE_WIDTH,
)


@dataclass(frozen=True)
class Version:
    """
    A SemVer 1.0.0 or 2.0.0 version, split into its segments.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        prerelease: Label of the prerelease segment (e.g. ``"alpha"``,
            ``"rc"``), or ``""`` for a release.
        prerelease_separator: Separator between the label and its number.
            ``"."`` for SemVer 2.0.0 numbers (``rc.3``); SemVer 1.0.0
            numbers (``rc03``) have none.
        prerelease_number: Numeric part of the prerelease segment, or
            ``None`` when the prerelease has no number. Zero is valid.
        spec_version: SemVer spec the string was written against. Only
            affects how prerelease numbers are stringified.
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    prerelease: str = ""
    prerelease_separator: str = ""
    prerelease_number: Optional[int] = None
    spec_version: str = SEMVER_SPEC_V2

    @property
    def is_prerelease(self) -> bool:
        """Return True if the version carries a prerelease segment."""
        return self.prerelease != ""

    @property
    def core(self) -> Tuple[int, int, int]:
        """Return the version core as a ``(major, minor, patch)`` tuple."""
        return (self.major, self.minor, self.patch)

    def to_string(
        self,
        *,
        include_v_prefix: bool = False,
        version_core_only: bool = False,
    ) -> str:
        """
        Render the version as a string.

        By default the complete version is produced. SemVer 1.0.0 prerelease
        numbers are zero-padded to two digits; SemVer 2.0.0 numbers are
        written verbatim after the recorded separator.

        Args:
            include_v_prefix: Prepend a ``v`` to the result.
            version_core_only: Produce only ``MAJOR.MINOR.PATCH``.

        Returns:
            Formatted version string.
        """
        parts: List[str] = []

        if include_v_prefix:
            parts.append("v")

        parts.append(f"{self.major}.{self.minor}.{self.patch}")

        if self.prerelease and not version_core_only:
            parts.append(f"-{self.prerelease}")

            if self.prerelease_number is not None:
                if self.spec_version == SEMVER_SPEC_V1:
                    number = f"{self.prerelease_number:0{SEMVER_V1_PRERELEASE_WIDTH}d}"
                else:
                    number = str(self.prerelease_number)
                parts.append(f"{self.prerelease_separator}{number}")

        return "".join(parts)

    def to_json(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary of the version's fields."""
        return {
            "version": self.to_string(),
            "major": self.major,
            "minor": self.minor,
            "patch": self.patch,
            "prerelease": self.prerelease or None,
            "prerelease_separator": self.prerelease_separator or None,
            "prerelease_number": self.prerelease_number,
            "spec_version": self.spec_version,
        }

    def __str__(self) -> str:
        return self.to_string()
