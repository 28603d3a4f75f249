"""
verbump: semantic version derivation for client-library releases

verbump parses, canonicalizes and advances SemVer 1.0.0 and 2.0.0 version
strings the way release tooling for generated client libraries needs them:

    • Next-version derivation from a change level (none/patch/minor/major)
    • Prerelease-number advancement for ``alpha``/``beta``/``rc`` tracks
    • Pre-1.0 downgrade rules, with per-language policies
    • Preview tracks that always stay ahead of the stable line
    • Change-level classification from Conventional Commits

Typical usage::

    >>> from verbump import ChangeLevel, derive_next, derive_next_preview
    >>> derive_next(ChangeLevel.MINOR, "1.2.3")
    '1.3.0'
    >>> derive_next_preview("1.2.3-rc.3", "1.2.3")
    '1.3.0-rc.1'
"""

from __future__ import annotations

from verbump.__version__ import __version__
from verbump.models import ChangeLevel, Version
from verbump.core import (
    ConventionalCommit,
    DeriveNextOptions,
    compare,
    derive_next,
    derive_next_preview,
    first_version,
    get_highest_change,
    max_version,
    next_version_from_commits,
    parse,
    parse_commit,
    parse_commit_message,
    validate_next,
)

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__author__ = "verbump Contributors"
__license__ = "Apache-2.0"
__description__ = "Semantic version derivation for client-library release tooling."

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "__version__",
    # Models
    "Version",
    "ChangeLevel",
    # Parsing and ordering
    "parse",
    "compare",
    "max_version",
    "validate_next",
    # Derivation
    "DeriveNextOptions",
    "derive_next",
    "derive_next_preview",
    "first_version",
    # Conventional commits
    "ConventionalCommit",
    "parse_commit",
    "parse_commit_message",
    "get_highest_change",
    "next_version_from_commits",
]
