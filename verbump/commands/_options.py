"""Option decorators shared by the derivation commands."""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

import click

from verbump.context import VerbumpContext
from verbump.core import DeriveNextOptions

F = TypeVar("F", bound=Callable)


def policy_options(func: F) -> F:
    """Add ``--language`` and the versioning policy flags to a command.

    The flags are tri-state: when omitted (``None``) the configured value
    or the language policy applies.
    """
    func = click.option(
        "--downgrade-pre-ga/--no-downgrade-pre-ga",
        "downgrade_pre_ga_changes",
        default=None,
        help="Treat minor changes as patch changes before 1.0.0.",
    )(func)
    func = click.option(
        "--bump-version-core/--no-bump-version-core",
        default=None,
        help="Bump MAJOR.MINOR.PATCH even when the version is a prerelease.",
    )(func)
    func = click.option(
        "--language",
        "-l",
        default=None,
        help="Start from this language's versioning policy (e.g. rust).",
    )(func)
    return func


def resolve_options(
    ctx: VerbumpContext,
    language: Optional[str],
    bump_version_core: Optional[bool],
    downgrade_pre_ga_changes: Optional[bool],
) -> DeriveNextOptions:
    """Combine configuration and command-line flags into derivation options."""
    return ctx.config.derive_options(
        language=language,
        bump_version_core=bump_version_core,
        downgrade_pre_ga_changes=downgrade_pre_ga_changes,
    )
