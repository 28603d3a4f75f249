"""
Centralized constants for verbump.

This module defines immutable values used across verbump, including SemVer
spec identifiers, default release versions, per-language versioning policies,
configuration file names, and logging formats. All values are intended to be
treated as read-only.
"""

from typing import Final, Mapping, Tuple

# ---------------------------------------------------------------------------
# SemVer spec identifiers
# ---------------------------------------------------------------------------

#: SemVer spec 2.0.0 (https://semver.org/spec/v2.0.0.html). Dotted prerelease
#: numbers such as ``rc.3``.
SEMVER_SPEC_V2: Final[str] = "2.0.0"

#: SemVer spec 1.0.0 (https://semver.org/spec/v1.0.0.html). Concatenated
#: prerelease numbers such as ``rc03``.
SEMVER_SPEC_V1: Final[str] = "1.0.0"

#: Separator between a prerelease label and its number in SemVer 2.0.0.
PRERELEASE_SEPARATOR: Final[str] = "."

#: Width that SemVer 1.0.0 prerelease numbers are zero-padded to.
SEMVER_V1_PRERELEASE_WIDTH: Final[int] = 2

# ---------------------------------------------------------------------------
# Release defaults
# ---------------------------------------------------------------------------

#: Version of a library's first stable release.
DEFAULT_VERSION: Final[str] = "0.1.0"

#: Version of a library's first preview release.
DEFAULT_PREVIEW_VERSION: Final[str] = "0.1.0-preview.1"

#: Stable version assumed when a preview track predates any stable release.
ZERO_VERSION: Final[str] = "0.0.0"

# ---------------------------------------------------------------------------
# Language versioning policies
# ---------------------------------------------------------------------------

#: Per-language overrides for next-version derivation. Languages missing from
#: this mapping use the default options. Keys are lowercase language names.
LANGUAGE_VERSIONING_OPTIONS: Final[Mapping[str, Mapping[str, bool]]] = {
    "rust": {
        "bump_version_core": True,
        "downgrade_pre_ga_changes": True,
    },
}

# ---------------------------------------------------------------------------
# Conventional commits
# ---------------------------------------------------------------------------

#: Footer tokens that mark a commit as a breaking change.
BREAKING_CHANGE_FOOTERS: Final[Tuple[str, ...]] = ("BREAKING CHANGE", "BREAKING-CHANGE")

#: Markers around a commit nested inside another commit's message body.
NESTED_COMMIT_BEGIN: Final[str] = "BEGIN_NESTED_COMMIT"
NESTED_COMMIT_END: Final[str] = "END_NESTED_COMMIT"

#: Separator between commit messages in ``git log --format=%B%x00`` output.
COMMIT_LOG_SEPARATOR: Final[str] = "\x00"

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

#: Dedicated configuration file name, settings under ``[verbump]``.
CONFIG_FILE_NAME: Final[str] = "verbump.toml"

#: Project file searched for a ``[tool.verbump]`` table.
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"

#: Default for ``bump_version_core`` when neither language nor config set it.
DEFAULT_BUMP_VERSION_CORE: Final[bool] = False

#: Default for ``downgrade_pre_ga_changes``.
DEFAULT_DOWNGRADE_PRE_GA_CHANGES: Final[bool] = False

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
