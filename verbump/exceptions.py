"""
Custom exception hierarchy for verbump.

This module defines structured exception types used across verbump.
All exceptions inherit from :class:`VerbumpError` and support optional
structured metadata via the ``details`` attribute to improve diagnostics
and logging.

Version problems derive from :class:`VersionError` so callers can catch
every parse or derivation failure with a single ``except`` clause while
still telling the individual kinds apart.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional


class VerbumpError(Exception):
    """Base exception for all verbump errors.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


# ---------------------------------------------------------------------------
# Version errors
# ---------------------------------------------------------------------------


class VersionError(VerbumpError):
    """Base class for errors about a specific version string.

    Args:
        message: Error description.
        version: The offending version string.
    """

    __slots__ = ("version",)

    def __init__(self, message: str, *, version: Optional[str] = None) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "version", version)

        super().__init__(message, details)

        self.version = version


class InvalidVersionError(VersionError):
    """Raised when a version string is not valid SemVer.

    Covers a forbidden leading ``v``, malformed grammar and non-numeric
    version core segments.
    """

    def __init__(self, version: str) -> None:
        super().__init__("invalid version format", version=version)


class InvalidPrereleaseNumberError(VersionError):
    """Raised when the number after the last ``.`` of a prerelease is not numeric.

    Args:
        version: The offending version string.
        number: The text that failed to convert.
    """

    __slots__ = ("number",)

    def __init__(self, version: str, *, number: str) -> None:
        super().__init__("invalid prerelease number", version=version)
        self.number = number
        self.details["number"] = number


class InvalidPreviewVersionError(VersionError):
    """Raised when the preview version given to preview derivation cannot be parsed."""

    def __init__(self, version: str) -> None:
        super().__init__("failed to parse preview version", version=version)


class InvalidStableVersionError(VersionError):
    """Raised when the stable version given to preview derivation cannot be parsed."""

    def __init__(self, version: str) -> None:
        super().__init__("failed to parse stable version", version=version)


class PreviewMissingPrereleaseError(VersionError):
    """Raised when a preview version has no prerelease segment."""

    def __init__(self, version: str) -> None:
        super().__init__(
            "provided preview version has no prerelease segment", version=version
        )


class VersionRegressionError(VersionError):
    """Raised when a proposed next version does not move past the current one.

    Args:
        current_version: Version currently released.
        next_version: Proposed next version.
    """

    __slots__ = ("current_version",)

    def __init__(self, current_version: str, next_version: str) -> None:
        super().__init__(
            f"next version {next_version} must be greater than "
            f"current version {current_version}",
            version=next_version,
        )
        self.current_version = current_version
        self.details["current"] = current_version


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------


class ConfigError(VerbumpError):
    """Raised when configuration cannot be found, read or validated.

    Args:
        message: Error description.
        config_path: Path to the configuration file involved.
        option: Name of the offending option, if any.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option
