"""
Conventional Commits classification for verbump.

Release tooling decides how far to bump a library from the commits made
since its last release. Commit messages following the Conventional
Commits format (https://www.conventionalcommits.org) map onto change
levels:

- a nested commit (see below) is always minor
- a breaking change (``feat!:`` or a ``BREAKING CHANGE:`` footer) is major
- ``feat`` is minor
- ``fix`` is patch
- every other type (``docs``, ``chore``, ...) does not trigger a release

Generated pull requests carry the upstream commits they were built from
as ``BEGIN_NESTED_COMMIT`` ... ``END_NESTED_COMMIT`` blocks in the body.
Each block is parsed as its own commit, flagged ``is_nested``, so that a
regeneration always produces a minor release whatever the nested types.

Messages that are not conventional commits are ignored.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

from verbump.models import ChangeLevel
from verbump.utils.logger import get_logger
from verbump.constants import (
    BREAKING_CHANGE_FOOTERS,
    NESTED_COMMIT_BEGIN,
    NESTED_COMMIT_END,
)
from verbump.core.derive import DeriveNextOptions, derive_next

logger = get_logger("commits")

_HEADER_PATTERN = re.compile(
    r"^(?P<type>[A-Za-z][\w-]*)"
    r"(?:\((?P<scope>[^()\r\n]*)\))?"
    r"(?P<breaking>!)?"
    r": (?P<description>\S.*)$"
)

_BREAKING_FOOTER_PATTERN = re.compile(
    r"^(?:{})\s*:\s*\S".format(
        "|".join(re.escape(token) for token in BREAKING_CHANGE_FOOTERS)
    ),
    re.MULTILINE,
)

_NESTED_BLOCK_PATTERN = re.compile(
    r"^{}[ \t\r]*$(?P<content>.*?)^{}[ \t\r]*$".format(
        re.escape(NESTED_COMMIT_BEGIN), re.escape(NESTED_COMMIT_END)
    ),
    re.MULTILINE | re.DOTALL,
)


@dataclass
class ConventionalCommit:
    """
    A commit message parsed according to Conventional Commits.

    Attributes:
        type: Commit type, lowercased (``feat``, ``fix``, ``docs``, ...).
        description: Header text after ``type(scope):``.
        scope: Optional scope from the header.
        is_breaking: Whether the commit declares a breaking change.
        body: Message text after the header, stripped, without nested blocks.
        is_nested: Whether the commit came from a nested commit block.
    """

    type: str
    description: str
    scope: Optional[str] = None
    is_breaking: bool = False
    body: str = ""
    is_nested: bool = False

    @property
    def change_level(self) -> ChangeLevel:
        """Return the change level this commit contributes."""
        if self.is_nested:
            return ChangeLevel.MINOR
        if self.is_breaking:
            return ChangeLevel.MAJOR
        if self.type == "feat":
            return ChangeLevel.MINOR
        if self.type == "fix":
            return ChangeLevel.PATCH
        return ChangeLevel.NONE


def _parse_single(
    text: str, *, is_nested: bool = False
) -> Optional[ConventionalCommit]:
    text = text.strip()
    if not text:
        return None

    header, _, body = text.partition("\n")
    match = _HEADER_PATTERN.match(header.strip())
    if match is None:
        logger.debug("Ignoring non-conventional commit: %s", header.strip())
        return None

    body = body.strip()
    return ConventionalCommit(
        type=match.group("type").lower(),
        description=match.group("description").strip(),
        scope=match.group("scope") or None,
        is_breaking=bool(match.group("breaking"))
        or bool(_BREAKING_FOOTER_PATTERN.search(body)),
        body=body,
        is_nested=is_nested,
    )


def parse_commit_message(message: str) -> Optional[ConventionalCommit]:
    """Parse the outer commit of a full commit message.

    Nested commit blocks are removed before parsing, so their headers and
    footers never leak into the outer commit. Use :func:`parse_commit` to
    get the nested commits as well.

    Args:
        message: Commit message; the first non-blank line is the header.

    Returns:
        The parsed commit, or ``None`` if the header is not conventional.

    Examples:
        >>> parse_commit_message("feat(storage)!: drop v1 buckets").is_breaking
        True
        >>> parse_commit_message("Merge branch 'main'") is None
        True
    """
    return _parse_single(_NESTED_BLOCK_PATTERN.sub("", message))


def parse_commit(message: str) -> List[ConventionalCommit]:
    """Parse a commit message into its outer commit and any nested commits.

    Examples:
        >>> msg = "chore: regen\\n\\nBEGIN_NESTED_COMMIT\\nfix: a bug\\nEND_NESTED_COMMIT\\n"
        >>> [(c.type, c.is_nested) for c in parse_commit(msg)]
        [('chore', False), ('fix', True)]
    """
    commits: List[ConventionalCommit] = []
    outer = parse_commit_message(message)
    if outer is not None:
        commits.append(outer)

    for block in _NESTED_BLOCK_PATTERN.finditer(message):
        nested = _parse_single(block.group("content"), is_nested=True)
        if nested is not None:
            commits.append(nested)
    return commits


def get_highest_change(commits: Iterable[ConventionalCommit]) -> ChangeLevel:
    """Return the highest change level among ``commits``.

    Returns :attr:`ChangeLevel.NONE` when there are no commits.
    """
    return max((commit.change_level for commit in commits), default=ChangeLevel.NONE)


def parse_commit_messages(messages: Iterable[str]) -> List[ConventionalCommit]:
    """Parse many commit messages, dropping the non-conventional ones.

    Nested commits follow the commit whose body carried them.
    """
    commits: List[ConventionalCommit] = []
    for message in messages:
        commits.extend(parse_commit(message))
    return commits


def next_version_from_commits(
    messages: Iterable[str],
    current_version: str,
    options: Optional[DeriveNextOptions] = None,
) -> str:
    """Derive the next version from the commit messages since the last release.

    Examples:
        >>> next_version_from_commits(["fix: typo", "feat: add retries"], "1.4.2")
        '1.5.0'
    """
    commits = parse_commit_messages(messages)
    highest = get_highest_change(commits)
    logger.info(
        "Highest change across %d conventional commit(s): %s", len(commits), highest
    )
    return derive_next(highest, current_version, options)
