"""
Executable module for verbump.

Running:
    python -m verbump

is equivalent to:
    verbump
"""

from __future__ import annotations

import sys


def _print_startup_error(exc: ImportError) -> None:
    """Report a CLI import failure on stderr."""
    sys.stderr.write("verbump CLI could not be loaded.\n")
    sys.stderr.write(f"Python version : {sys.version}\n")
    try:
        from verbump.__version__ import __version__

        sys.stderr.write(f"verbump version: {__version__}\n")
    except ImportError:
        sys.stderr.write("verbump version: <unknown>\n")
    sys.stderr.write("\n")
    sys.stderr.write(f"ImportError: {exc}\n")


def main() -> int:
    """Entrypoint for ``python -m verbump``.

    Returns:
        Exit code returned by the CLI, or 1 if the CLI cannot be imported.
    """
    try:
        # Import lazily so dependencies are only loaded during CLI use
        from verbump.cli import main as cli_main
    except ImportError as exc:
        _print_startup_error(exc)
        return 1

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
