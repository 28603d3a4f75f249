"""
SemVer grammar checks for verbump.

Validity and canonicalization follow the rules used by Go's
``golang.org/x/mod/semver`` package, which release tooling across
languages agrees on:

- Versions carry a leading ``v`` (callers prepend it; verbump's own
  version strings never have one).
- ``vMAJOR`` and ``vMAJOR.MINOR`` are accepted as shorthands for
  ``vMAJOR.0.0`` and ``vMAJOR.MINOR.0``, but only when nothing follows.
- Numeric segments are ``0`` or have no leading zeros. The same applies to
  purely numeric prerelease identifiers.
- Build metadata is allowed but dropped by :func:`canonical`.
"""

from __future__ import annotations

import re

# A prerelease identifier: a number without leading zeros, or any
# alphanumeric/hyphen run containing at least one non-digit.
_PRERELEASE_IDENT = r"(?:0|[1-9][0-9]*|[0-9]*[A-Za-z-][0-9A-Za-z-]*)"
_BUILD_IDENT = r"[0-9A-Za-z-]+"

_SEMVER_PATTERN = re.compile(
    rf"""
    v
    (?P<major>0|[1-9][0-9]*)
    (?:
        \.(?P<minor>0|[1-9][0-9]*)
        (?:
            \.(?P<patch>0|[1-9][0-9]*)
            (?P<prerelease>-{_PRERELEASE_IDENT}(?:\.{_PRERELEASE_IDENT})*)?
            (?P<build>\+{_BUILD_IDENT}(?:\.{_BUILD_IDENT})*)?
        )?
    )?
    """,
    re.VERBOSE,
)


def is_valid(version: str) -> bool:
    """Return True if ``version`` is a valid ``v``-prefixed semantic version.

    Examples:
        >>> is_valid("v1.2.3-rc.1+build.5")
        True
        >>> is_valid("v1.2-rc.1")
        False
        >>> is_valid("1.2.3")
        False
    """
    return _SEMVER_PATTERN.fullmatch(version) is not None


def canonical(version: str) -> str:
    """Return the canonical form of a ``v``-prefixed semantic version.

    Missing minor and patch segments are zero-filled and build metadata is
    stripped; the prerelease is preserved. Invalid input yields ``""``.

    Examples:
        >>> canonical("v1.2")
        'v1.2.0'
        >>> canonical("v1.2.3-beta.2+exp.sha.5114f85")
        'v1.2.3-beta.2'
    """
    match = _SEMVER_PATTERN.fullmatch(version)
    if match is None:
        return ""

    return "v{}.{}.{}{}".format(
        match.group("major"),
        match.group("minor") or "0",
        match.group("patch") or "0",
        match.group("prerelease") or "",
    )


def prerelease(version: str) -> str:
    """Return the prerelease suffix of a ``v``-prefixed version, including the ``-``.

    Returns ``""`` when the version has no prerelease or is invalid.

    Examples:
        >>> prerelease("v1.2.3-alpha.1+meta")
        '-alpha.1'
    """
    match = _SEMVER_PATTERN.fullmatch(version)
    if match is None:
        return ""
    return match.group("prerelease") or ""
