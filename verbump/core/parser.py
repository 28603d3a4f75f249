"""
SemVer version parser for verbump.

Parses SemVer 1.0.0 and 2.0.0 version strings into :class:`Version`
values. The two specs number prereleases differently and both appear in
client-library manifests:

- SemVer 2.0.0 separates the number with a dot: ``1.2.3-rc.3``
- SemVer 1.0.0 appends the number to the label: ``1.2.3-rc03``

The prerelease segment is disambiguated by an ordered cascade of rules:
dotted notation first, then a trailing run of digits, then the whole
segment as a bare label. Each rule lives in its own helper and returns
``None`` when it does not apply.

Build metadata is accepted and discarded; it is never round-tripped.
"""

from __future__ import annotations

import re
from typing import NamedTuple, Optional

from verbump.core import grammar
from verbump.models.version import Version
from verbump.utils.logger import get_logger
from verbump.constants import (
    PRERELEASE_SEPARATOR,
    SEMVER_SPEC_V1,
    SEMVER_SPEC_V2,
)
from verbump.exceptions import InvalidPrereleaseNumberError, InvalidVersionError

logger = get_logger("parser")

# Extracts the number of a SemVer 1.0.0 style numbered prerelease such as
# "alpha01" (https://semver.org/spec/v1.0.0.html#spec-item-4).
_SEMVER_V1_PRERELEASE_NUMBER = re.compile(r"^(.*?)(\d+)$")


class _PrereleaseParts(NamedTuple):
    """Result of one prerelease disambiguation rule."""

    label: str
    separator: str
    number: Optional[str]
    spec_version: str


def parse(version: str) -> Version:
    """Parse a SemVer 1.0.0 or 2.0.0 version string.

    Args:
        version: Version string without a leading ``v``. Missing minor and
            patch segments are zero-filled.

    Returns:
        The parsed :class:`Version`.

    Raises:
        InvalidVersionError: ``version`` starts with ``v`` or is not valid SemVer.
        InvalidPrereleaseNumberError: A dotted prerelease ends in a
            non-numeric identifier (e.g. ``1.2.3-rc.abc``).

    Examples:
        >>> parse("1.2.3-beta21")
        Version(major=1, minor=2, patch=3, prerelease='beta', prerelease_separator='', prerelease_number=21, spec_version='1.0.0')
        >>> str(parse("1.2"))
        '1.2.0'
    """
    # Client versions must not have a "v" prefix.
    if version.startswith("v"):
        raise InvalidVersionError(version)

    v_prefixed = "v" + version
    if not grammar.is_valid(v_prefixed):
        raise InvalidVersionError(version)
    v_prefixed = grammar.canonical(v_prefixed)

    prerelease = grammar.prerelease(v_prefixed)
    version_core = v_prefixed[1 : len(v_prefixed) - len(prerelease)]

    try:
        major, minor, patch = (int(part) for part in version_core.split("."))
    except ValueError as exc:
        raise InvalidVersionError(version) from exc

    if not prerelease:
        return Version(major=major, minor=minor, patch=patch)

    parts = _split_prerelease(prerelease[1:])

    number: Optional[int] = None
    if parts.number is not None:
        try:
            number = int(parts.number)
        except ValueError as exc:
            raise InvalidPrereleaseNumberError(version, number=parts.number) from exc

    parsed = Version(
        major=major,
        minor=minor,
        patch=patch,
        prerelease=parts.label,
        prerelease_separator=parts.separator,
        prerelease_number=number,
        spec_version=parts.spec_version,
    )
    logger.debug("Parsed %s as %r", version, parsed)
    return parsed


def _split_prerelease(prerelease: str) -> _PrereleaseParts:
    """Split a prerelease segment into label and number, trying each notation in turn."""
    return (
        _split_dotted(prerelease)
        or _split_concatenated(prerelease)
        or _PrereleaseParts(prerelease, "", None, SEMVER_SPEC_V2)
    )


def _split_dotted(prerelease: str) -> Optional[_PrereleaseParts]:
    """SemVer 2.0.0: everything after the last dot is the number."""
    label, sep, number = prerelease.rpartition(PRERELEASE_SEPARATOR)
    if not sep:
        return None
    return _PrereleaseParts(label, PRERELEASE_SEPARATOR, number, SEMVER_SPEC_V2)


def _split_concatenated(prerelease: str) -> Optional[_PrereleaseParts]:
    """SemVer 1.0.0: a trailing run of digits is the number."""
    match = _SEMVER_V1_PRERELEASE_NUMBER.match(prerelease)
    # A purely numeric prerelease ("1.2.3-7") has no label to attach a
    # number to, so it stays a bare label.
    if match is None or not match.group(1):
        return None
    return _PrereleaseParts(match.group(1), "", match.group(2), SEMVER_SPEC_V1)
