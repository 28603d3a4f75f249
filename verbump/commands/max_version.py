"""Max command implementation for verbump.

Prints the largest of several versions by SemVer precedence. Invalid
candidates (including ``v``-prefixed tags) are skipped rather than
rejected, so the command can be fed raw tag or manifest listings.

Typical usage::

    $ verbump max 1.2.3 1.2.4 1.2.4-rc.1
    1.2.4
"""

from __future__ import annotations

import sys
from typing import Tuple

import click

from verbump.core import max_version
from verbump.utils import get_logger, print_error

logger = get_logger("commands.max")


@click.command("max")
@click.argument("versions", nargs=-1)
def max_command(versions: Tuple[str, ...]) -> None:
    """Print the largest valid version among VERSIONS."""
    result = max_version(*versions)
    if not result:
        print_error("No valid versions given")
        sys.exit(1)

    logger.info("Largest of %d candidate(s): %s", len(versions), result)
    click.echo(result)
