"""Parse command implementation for verbump.

Shows how verbump reads a version string: its version core, prerelease
label and number, and which SemVer spec the prerelease notation follows.

Typical usage::

    $ verbump parse 1.2.3-beta21
    $ verbump parse 1.2.3-rc.1 --format json
"""

from __future__ import annotations

import sys
import json

import click

from verbump.core import parse
from verbump.models import Version
from verbump.exceptions import VerbumpError
from verbump.utils import get_logger, print_error, print_table

logger = get_logger("commands.parse")


@click.command("parse")
@click.argument("version")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default="table",
    help="Output format.",
)
def parse_command(version: str, output_format: str) -> None:
    """Parse VERSION and show its components."""
    try:
        parsed = parse(version)
    except VerbumpError as e:
        print_error(f"{e}")
        sys.exit(1)

    if output_format == "json":
        print(json.dumps(parsed.to_json(), indent=2))
    else:
        _display_table(parsed)


def _display_table(version: Version) -> None:
    """Render the parsed fields as a two-column table."""
    fields = version.to_json()
    data = [{"Field": name, "Value": value} for name, value in fields.items()]

    print_table(
        data,
        title="Parsed Version",
        column_styles={
            "Field": {"style": "bold cyan", "no_wrap": True},
            "Value": {"justify": "left"},
        },
    )
