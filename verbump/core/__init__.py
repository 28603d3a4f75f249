"""
Core functionality exports for verbump.

This module provides convenient access to the version engine. Importing
from here keeps user-facing imports clean and stable:

    from verbump.core import derive_next, parse
"""

from __future__ import annotations

from verbump.core.parser import parse
from verbump.core.grammar import canonical, is_valid
from verbump.core.ordering import compare, max_version, validate_next
from verbump.core.derive import (
    DeriveNextOptions,
    derive_next,
    derive_next_preview,
    first_version,
    options_for_language,
)
from verbump.core.commits import (
    ConventionalCommit,
    get_highest_change,
    next_version_from_commits,
    parse_commit,
    parse_commit_message,
    parse_commit_messages,
)

__all__ = [
    "parse",
    "is_valid",
    "canonical",
    "compare",
    "max_version",
    "validate_next",
    "DeriveNextOptions",
    "derive_next",
    "derive_next_preview",
    "first_version",
    "options_for_language",
    "ConventionalCommit",
    "parse_commit",
    "parse_commit_message",
    "parse_commit_messages",
    "get_highest_change",
    "next_version_from_commits",
]
