"""
Next-version derivation for verbump.

Given the current version of a library and the highest level of change
since its last release, :func:`derive_next` computes the version of the
next release. :func:`derive_next_preview` does the same for a preview
track, which must always stay ahead of the library's stable line.

Policy summary:

- A prerelease only advances its prerelease number unless
  ``bump_version_core`` is set; the change level is then irrelevant.
- Before 1.0.0 a breaking change bumps the minor version. With
  ``downgrade_pre_ga_changes`` a feature additionally bumps only the patch
  version (Rust crates version this way).
- Preview tracks treat every change as a minor change.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from verbump.core.parser import parse
from verbump.models import ChangeLevel, Version
from verbump.utils.logger import get_logger
from verbump.constants import (
    DEFAULT_BUMP_VERSION_CORE,
    DEFAULT_DOWNGRADE_PRE_GA_CHANGES,
    DEFAULT_PREVIEW_VERSION,
    DEFAULT_VERSION,
    LANGUAGE_VERSIONING_OPTIONS,
    PRERELEASE_SEPARATOR,
)
from verbump.exceptions import (
    InvalidPreviewVersionError,
    InvalidStableVersionError,
    PreviewMissingPrereleaseError,
    VersionError,
)

logger = get_logger("derive")


@dataclass(frozen=True)
class DeriveNextOptions:
    """Options controlling next-version derivation.

    Attributes:
        bump_version_core: Bump the version core even when the current
            version is a prerelease. A prerelease number, if present, is
            reset to 1. By default only the prerelease number advances
            (one is added when the prerelease has none).
        downgrade_pre_ga_changes: Treat :attr:`ChangeLevel.MINOR` changes
            as :attr:`ChangeLevel.PATCH` while the major version is 0.
            :attr:`ChangeLevel.MAJOR` changes are always treated as minor
            before 1.0.0, whether or not this is set. Has no effect on
            prereleases unless ``bump_version_core`` is also set.
    """

    bump_version_core: bool = DEFAULT_BUMP_VERSION_CORE
    downgrade_pre_ga_changes: bool = DEFAULT_DOWNGRADE_PRE_GA_CHANGES

    def derive_next(self, change_level: ChangeLevel, current_version: str) -> str:
        """Derive the next version from ``current_version`` and ``change_level``.

        Args:
            change_level: Highest level of change since the last release.
            current_version: Currently released version.

        Returns:
            The next version. ``current_version`` is returned unchanged (and
            unvalidated) for :attr:`ChangeLevel.NONE`.

        Raises:
            InvalidVersionError: ``current_version`` is not a valid version.
            InvalidPrereleaseNumberError: ``current_version`` has a
                non-numeric dotted prerelease number.
        """
        if change_level == ChangeLevel.NONE:
            return current_version

        next_version = self._derive_next(change_level, parse(current_version))
        logger.debug(
            "Derived %s from %s (change: %s)",
            next_version,
            current_version,
            change_level,
        )
        return next_version

    def derive_next_preview(self, preview_version: str, stable_version: str) -> str:
        """Derive the next preview version relative to the stable version.

        Previews always lead the stable line. When the preview's version
        core is equal to or behind the stable core, the preview is caught up
        and its core bumped; when it is ahead, only the prerelease number
        advances. Every change is treated as :attr:`ChangeLevel.MINOR`.

        Args:
            preview_version: Current preview version; must be a prerelease.
            stable_version: Current stable version.

        Returns:
            The next preview version.

        Raises:
            InvalidPreviewVersionError: ``preview_version`` cannot be parsed.
            PreviewMissingPrereleaseError: ``preview_version`` has no
                prerelease segment.
            InvalidStableVersionError: ``stable_version`` cannot be parsed.
        """
        try:
            preview = parse(preview_version)
        except VersionError as exc:
            raise InvalidPreviewVersionError(preview_version) from exc

        if not preview.is_prerelease:
            raise PreviewMissingPrereleaseError(preview_version)

        try:
            stable = parse(stable_version)
        except VersionError as exc:
            raise InvalidStableVersionError(stable_version) from exc

        # Language-specific options other than bump_version_core are kept.
        if preview.core == stable.core:
            # Stable caught up to preview, so bump the preview core.
            options = replace(self, bump_version_core=True)
        elif preview.core > stable.core:
            # Preview is ahead, only the prerelease number moves.
            options = replace(self, bump_version_core=False)
        else:
            # Catch up to the stable core, then bump and reset the prerelease.
            preview = replace(
                preview,
                major=stable.major,
                minor=stable.minor,
                patch=stable.patch,
            )
            options = replace(self, bump_version_core=True)

        next_version = options._derive_next(ChangeLevel.MINOR, preview)
        logger.debug(
            "Derived preview %s from %s (stable: %s)",
            next_version,
            preview_version,
            stable_version,
        )
        return next_version

    def _derive_next(self, change_level: ChangeLevel, version: Version) -> str:
        if version.is_prerelease and not self.bump_version_core:
            if version.prerelease_number is None:
                # The first numbered prerelease is 1, not 0.
                version = replace(
                    version,
                    prerelease_separator=PRERELEASE_SEPARATOR,
                    prerelease_number=1,
                )
            else:
                version = replace(
                    version, prerelease_number=version.prerelease_number + 1
                )
            return version.to_string()

        if version.prerelease_number is not None and self.bump_version_core:
            version = replace(version, prerelease_number=1)

        # Breaking changes before 1.0.0 are minor bumps in every language.
        if version.major == 0:
            if change_level == ChangeLevel.MAJOR:
                change_level = ChangeLevel.MINOR
            elif change_level == ChangeLevel.MINOR and self.downgrade_pre_ga_changes:
                change_level = ChangeLevel.PATCH

        if change_level == ChangeLevel.MAJOR:
            version = replace(version, major=version.major + 1, minor=0, patch=0)
        elif change_level == ChangeLevel.MINOR:
            version = replace(version, minor=version.minor + 1, patch=0)
        elif change_level == ChangeLevel.PATCH:
            version = replace(version, patch=version.patch + 1)

        return version.to_string()


def derive_next(
    change_level: ChangeLevel,
    current_version: str,
    options: Optional[DeriveNextOptions] = None,
) -> str:
    """Derive the next version; see :meth:`DeriveNextOptions.derive_next`.

    Examples:
        >>> derive_next(ChangeLevel.MAJOR, "0.2.3")
        '0.3.0'
        >>> derive_next(ChangeLevel.MAJOR, "1.2.3-beta21")
        '1.2.3-beta22'
    """
    return (options or DeriveNextOptions()).derive_next(change_level, current_version)


def derive_next_preview(
    preview_version: str,
    stable_version: str,
    options: Optional[DeriveNextOptions] = None,
) -> str:
    """Derive the next preview version; see :meth:`DeriveNextOptions.derive_next_preview`.

    Examples:
        >>> derive_next_preview("1.2.3-rc.3", "1.3.0")
        '1.4.0-rc.1'
    """
    return (options or DeriveNextOptions()).derive_next_preview(
        preview_version, stable_version
    )


def first_version(preview: bool = False) -> str:
    """Return the version of a library's first release on a stable or preview track."""
    return DEFAULT_PREVIEW_VERSION if preview else DEFAULT_VERSION


def options_for_language(language: Optional[str]) -> DeriveNextOptions:
    """Return the versioning options a language uses.

    Languages without specific needs get the default options.

    Examples:
        >>> options_for_language("Rust")
        DeriveNextOptions(bump_version_core=True, downgrade_pre_ga_changes=True)
    """
    if not language:
        return DeriveNextOptions()
    overrides = LANGUAGE_VERSIONING_OPTIONS.get(language.strip().lower(), {})
    return DeriveNextOptions(**overrides)
