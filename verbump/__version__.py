"""
verbump version information.

This module provides a single source of truth for the package version.
verbump versions itself with its own rules: a plain SemVer 2.0.0 string
without a leading ``v``.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Main version (single source of truth)
# ---------------------------------------------------------------------------

__version__ = "0.1.0"


# ---------------------------------------------------------------------------
# Human-readable version (for CLI)
# ---------------------------------------------------------------------------

VERSION_STRING = f"verbump {__version__}"
