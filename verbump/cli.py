"""
Command-line interface for verbump.

This module provides the main CLI entry point and handles global options,
configuration loading, and command registration.
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click

from verbump.config import load_config
from verbump.__version__ import __version__
from verbump.context import VerbumpContext
from verbump.exceptions import ConfigError, VerbumpError
from verbump.utils.logger import get_logger, level_for_verbosity, setup_logging
from verbump.utils.console import print_error, print_warning, reconfigure_console
from verbump.commands.max_version import max_command
from verbump.commands.next_version import next_version
from verbump.commands.parse import parse_command
from verbump.commands.preview import preview
from verbump.commands.validate import validate

logger = get_logger("cli")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
    envvar="VERBUMP_CONFIG",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar="VERBUMP_COLOR",
)
@click.version_option(
    version=__version__,
    prog_name="verbump",
    message="%(prog)s %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: int,
    color: bool,
) -> None:
    """verbump: semantic version derivation for library releases.

    \b
    Available commands:
      verbump parse VERSION           Show the components of a version
      verbump next VERSION            Print the next release version
      verbump preview PREVIEW         Print the next preview version
      verbump max VERSION...          Print the largest version
      verbump validate NEXT           Check a hand-picked next version

    \b
    Examples:
      verbump next 1.2.3 --level patch
      verbump next 0.4.1 --language rust
      verbump preview 1.2.3-rc.3 --stable 1.2.3
      verbump -v validate 2.0.0 --current 1.4.2

    Use ``verbump COMMAND --help`` for command-specific options.
    """
    level = level_for_verbosity(verbose)
    setup_logging(level=level, verbose=verbose > 1)
    logger.debug("Logging initialized at %s level", logging.getLevelName(level))

    # Respect NO_COLOR for downstream libraries
    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()

    try:
        loaded_config = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        ctx.exit(1)

    verbump_ctx = VerbumpContext()
    verbump_ctx.config_path = config or loaded_config.source_path
    verbump_ctx.config = loaded_config
    verbump_ctx.color = color
    verbump_ctx.verbose = verbose
    ctx.obj = verbump_ctx

    logger.debug("verbump v%s", __version__)
    logger.debug("Config path: %s", verbump_ctx.config_path)
    if loaded_config.source_path:
        logger.debug("Loaded configuration: %s", loaded_config.to_log_dict())


cli.add_command(parse_command)
cli.add_command(next_version)
cli.add_command(preview)
cli.add_command(max_command)
cli.add_command(validate)


def main() -> int:
    """Main entry point for the verbump CLI.

    Returns:
        Exit code:
            0   Success
            1   Application error
            2   Usage error (Click)
            130 Interrupted by user (Ctrl+C)
    """
    try:
        result = cli(standalone_mode=False)
        # standalone_mode=False hands back ctx.exit() codes instead of raising
        return result if isinstance(result, int) else 0

    except click.exceptions.Abort:
        print_warning("Operation cancelled by user")
        return 130

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except VerbumpError as exc:
        print_error(str(exc))
        logger.debug(
            "VerbumpError details: %s",
            exc.details or "<none>",
            exc_info=True,
        )
        return 1

    except KeyboardInterrupt:
        print_warning("Operation cancelled by user")
        return 130

    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return 1


if __name__ == "__main__":
    sys.exit(main())
