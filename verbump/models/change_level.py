"""
Change level model for verbump.

A change level summarizes how much a set of changes affects a library's
public surface. Levels are totally ordered so the highest change across
many commits is simply their maximum.
"""

from __future__ import annotations

from enum import IntEnum


class ChangeLevel(IntEnum):
    """Level of change, corresponding to the SemVer version segments."""

    NONE = 0  # No releasable change
    PATCH = 1  # Backward-compatible bug fixes
    MINOR = 2  # Backward-compatible new features
    MAJOR = 3  # Incompatible API changes

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def from_string(cls, value: str) -> "ChangeLevel":
        """Return the level named by ``value`` (case-insensitive).

        Raises:
            ValueError: ``value`` does not name a change level.
        """
        try:
            return cls[value.strip().upper()]
        except KeyError:
            choices = ", ".join(str(level) for level in cls)
            raise ValueError(
                f"Unknown change level {value!r}; expected one of: {choices}"
            ) from None
