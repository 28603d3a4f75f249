"""Preview command implementation for verbump.

Prints the next version of a preview track. Preview releases always lead
the stable line: when the stable line has caught up with (or overtaken)
the preview's version core, the preview core moves one minor version
past it; otherwise only the prerelease number advances.

Typical usage::

    $ verbump preview 1.2.3-rc.3 --stable 1.2.3
    1.3.0-rc.1

    $ verbump preview 1.2.4-rc.1 --stable 1.2.3
    1.2.4-rc.2
"""

from __future__ import annotations

import sys
from typing import Optional

import click

from verbump.exceptions import VerbumpError
from verbump.constants import ZERO_VERSION
from verbump.context import pass_context, VerbumpContext
from verbump.commands._options import policy_options, resolve_options
from verbump.core import derive_next_preview, first_version
from verbump.utils import get_logger, print_error

logger = get_logger("commands.preview")


@click.command()
@click.argument("preview_version", metavar="PREVIEW", required=False)
@click.option(
    "--stable",
    "stable_version",
    default=ZERO_VERSION,
    show_default=True,
    help="Current version of the stable release line.",
)
@policy_options
@pass_context
def preview(
    ctx: VerbumpContext,
    preview_version: Optional[str],
    stable_version: str,
    language: Optional[str],
    bump_version_core: Optional[bool],
    downgrade_pre_ga_changes: Optional[bool],
) -> None:
    """Print the next preview version after PREVIEW.

    Without PREVIEW the preview track has never been released and the first
    preview version is printed. When the stable line has not been released
    yet, leave out --stable so the preview stays ahead of 0.0.0.
    """
    if preview_version is None:
        logger.info("No current preview version, using the first preview version")
        click.echo(first_version(preview=True))
        return

    options = resolve_options(ctx, language, bump_version_core, downgrade_pre_ga_changes)
    logger.debug("Derivation options: %s", options)

    try:
        result = derive_next_preview(preview_version, stable_version, options)
    except VerbumpError as e:
        cause = e.__cause__
        print_error(f"{e}: {cause}" if cause else f"{e}")
        sys.exit(1)

    click.echo(result)
