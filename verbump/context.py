"""
Shared context object for verbump CLI commands.

The group callback in :mod:`verbump.cli` fills one instance per invocation
and sub-commands receive it through :data:`pass_context`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from verbump.config import VerbumpConfig


class VerbumpContext:
    """Global context object for verbump CLI commands.

    Attributes:
        config_path: Path to the verbump configuration file, if any.
        config: Loaded configuration (defaults when no file was found).
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG).
        color: Whether colored terminal output is enabled.
    """

    __slots__ = ("config_path", "config", "verbose", "color")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.config: VerbumpConfig = VerbumpConfig()
        self.verbose: int = 0
        self.color: bool = True


#: Click decorator for injecting :class:`VerbumpContext` into commands.
pass_context = click.make_pass_decorator(VerbumpContext, ensure=True)
