"""Next command implementation for verbump.

Prints the version a library's next release should carry.

The change level comes from one of:

1. ``--level``: given explicitly
2. ``--message`` / ``--log-file``: classified from Conventional Commits
3. nothing: every release is treated as a minor change

Typical usage::

    $ verbump next 1.2.3 --level patch
    1.2.4

    $ git log --format=%B%x00 v1.2.3..HEAD | verbump next 1.2.3 --log-file -
    1.3.0

    $ verbump next 0.4.1 --language rust --level minor
    0.4.2
"""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO, Tuple

import click

from verbump.models import ChangeLevel
from verbump.exceptions import VerbumpError
from verbump.constants import COMMIT_LOG_SEPARATOR
from verbump.context import pass_context, VerbumpContext
from verbump.commands._options import policy_options, resolve_options
from verbump.core import (
    derive_next,
    first_version,
    get_highest_change,
    parse_commit_messages,
)
from verbump.utils import (
    colorize_change_level,
    get_logger,
    print_error,
    print_table,
)

logger = get_logger("commands.next")


@click.command("next")
@click.argument("version", required=False)
@click.option(
    "--level",
    type=click.Choice([str(level) for level in ChangeLevel], case_sensitive=False),
    default=None,
    help="Highest level of change since the last release.  [default: minor]",
)
@click.option(
    "--message",
    "-m",
    "messages",
    multiple=True,
    help="Commit message to classify (can be repeated).",
)
@click.option(
    "--log-file",
    type=click.File("r", encoding="utf-8"),
    default=None,
    help="NUL-separated commit messages ('-' for stdin), as from git log --format=%B%x00.",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["plain", "table"], case_sensitive=False),
    default="plain",
    help="Output format.",
)
@policy_options
@pass_context
def next_version(
    ctx: VerbumpContext,
    version: Optional[str],
    level: Optional[str],
    messages: Tuple[str, ...],
    log_file: Optional[TextIO],
    output_format: str,
    language: Optional[str],
    bump_version_core: Optional[bool],
    downgrade_pre_ga_changes: Optional[bool],
) -> None:
    """Print the next version after VERSION.

    Without VERSION the library has never been released and the first
    release version is printed.
    """
    from_commits = bool(messages) or log_file is not None
    if level is not None and from_commits:
        raise click.UsageError("--level cannot be combined with commit messages")

    if version is None:
        logger.info("No current version, using the first release version")
        click.echo(first_version())
        return

    options = resolve_options(ctx, language, bump_version_core, downgrade_pre_ga_changes)
    logger.debug("Derivation options: %s", options)

    if from_commits:
        all_messages = list(messages) + _read_commit_log(log_file)
        commits = parse_commit_messages(all_messages)
        change_level = get_highest_change(commits)
        logger.info(
            "Classified %d of %d message(s) as conventional commits",
            len(commits),
            len(all_messages),
        )
    else:
        change_level = ChangeLevel.from_string(level or str(ChangeLevel.MINOR))

    try:
        result = derive_next(change_level, version, options)
    except VerbumpError as e:
        print_error(f"{e}")
        sys.exit(1)

    if output_format == "table":
        print_table(
            [
                {
                    "Current": version,
                    "Next": result,
                    "Change": colorize_change_level(change_level),
                }
            ],
            title="Next Version",
            column_styles={
                "Current": {"justify": "center", "style": "dim"},
                "Next": {"justify": "center", "style": "version"},
                "Change": {"justify": "center"},
            },
        )
    else:
        click.echo(result)


def _read_commit_log(log_file: Optional[TextIO]) -> List[str]:
    """Split NUL-separated ``git log`` output into individual messages."""
    if log_file is None:
        return []
    return [
        message
        for message in log_file.read().split(COMMIT_LOG_SEPARATOR)
        if message.strip()
    ]
