"""
Unified data model exports for verbump.

Example:
    >>> from verbump.models import ChangeLevel, Version
"""

from __future__ import annotations

from verbump.models.version import Version
from verbump.models.change_level import ChangeLevel

__all__ = [
    "Version",
    "ChangeLevel",
]
