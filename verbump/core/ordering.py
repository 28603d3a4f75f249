"""
Version ordering utilities for verbump.

Precedence follows SemVer 2.0.0 (build metadata ignored, prereleases sort
before their release). Validation uses the same grammar as the parser, so
shorthand versions such as ``1.2`` compare equal to ``1.2.0`` and a
leading ``v`` is never accepted. Ordering itself is delegated to
:class:`semver.Version`.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import semver

from verbump.core import grammar
from verbump.core.parser import parse
from verbump.utils.logger import get_logger
from verbump.exceptions import InvalidVersionError, VersionRegressionError

logger = get_logger("ordering")


def _to_semver(version: str) -> Optional[semver.Version]:
    """Return ``version`` as a :class:`semver.Version`, or ``None`` if invalid."""
    # Client versions must not have a "v" prefix.
    if version.startswith("v"):
        return None
    canonical = grammar.canonical("v" + version)
    if not canonical:
        return None
    return semver.Version.parse(canonical[1:])


def compare(a: str, b: str) -> int:
    """Compare two versions by SemVer precedence.

    Args:
        a: First version.
        b: Second version.

    Returns:
        ``-1`` if ``a`` precedes ``b``, ``0`` if they are equal, ``1`` if
        ``a`` follows ``b``.

    Raises:
        InvalidVersionError: Either version is invalid or ``v``-prefixed.

    Examples:
        >>> compare("1.2.4-alpha", "1.2.4")
        -1
        >>> compare("1.2", "1.2.0+build.7")
        0
    """
    left = _to_semver(a)
    if left is None:
        raise InvalidVersionError(a)
    right = _to_semver(b)
    if right is None:
        raise InvalidVersionError(b)
    return left.compare(right)


def max_version(*versions: str) -> str:
    """Return the largest version among ``versions``.

    Candidates that are invalid or carry a ``v`` prefix are skipped. Among
    versions of equal precedence the lexically largest string wins.

    Returns:
        The largest version as given, or ``""`` when no candidate is valid.

    Examples:
        >>> max_version("1.2.3", "1.2.4", "1.2.2")
        '1.2.4'
        >>> max_version()
        ''
    """
    candidates: List[Tuple[semver.Version, str]] = []
    for version in versions:
        parsed = _to_semver(version)
        if parsed is None:
            logger.debug("Skipping invalid version candidate %r", version)
            continue
        candidates.append((parsed, version))

    if not candidates:
        return ""

    return max(candidates)[1]


def validate_next(current_version: str, next_version: str) -> None:
    """Check that ``next_version`` is a valid successor of ``current_version``.

    Used for manual version overrides and for checking the versions a
    release commit introduces.

    Args:
        current_version: Currently released version, or ``""`` if the
            library has never been released.
        next_version: Proposed next version.

    Raises:
        InvalidVersionError: Either version is not a valid version.
        InvalidPrereleaseNumberError: Either version has a non-numeric
            dotted prerelease number.
        VersionRegressionError: ``next_version`` does not follow
            ``current_version`` (equal versions are rejected too).
    """
    parse(next_version)

    if not current_version:
        return

    parse(current_version)

    if compare(next_version, current_version) <= 0:
        raise VersionRegressionError(current_version, next_version)
