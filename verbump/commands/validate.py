"""Validate command implementation for verbump.

Checks a hand-picked release version before it is written anywhere: it
must be valid and must move past the currently released version.

Typical usage::

    $ verbump validate 2.0.0 --current 1.4.2
    [OK] 2.0.0 is a valid next version after 1.4.2

    $ verbump validate 0.1.0
    [OK] 0.1.0 is a valid first version
"""

from __future__ import annotations

import sys

import click

from verbump.core import validate_next
from verbump.exceptions import VerbumpError
from verbump.utils import get_logger, print_error, print_success

logger = get_logger("commands.validate")


@click.command()
@click.argument("next_version", metavar="NEXT")
@click.option(
    "--current",
    "current_version",
    default="",
    help="Currently released version; omit for a first release.",
)
def validate(next_version: str, current_version: str) -> None:
    """Check that NEXT is a valid successor of the current version."""
    try:
        validate_next(current_version, next_version)
    except VerbumpError as e:
        print_error(f"{e}")
        sys.exit(1)

    if current_version:
        print_success(f"{next_version} is a valid next version after {current_version}")
    else:
        print_success(f"{next_version} is a valid first version")
