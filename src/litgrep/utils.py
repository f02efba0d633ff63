"""Exit codes and the fatal-error helper."""

import sys
from typing import NoReturn

import typer

from .output import print_plain

# grep-compatible exit codes
EXIT_MATCH = 0
EXIT_NO_MATCH = 1
EXIT_ERROR = 2


def fatal(message: str, *, code: int = EXIT_ERROR) -> NoReturn:
    """Print an error message to stderr and exit."""
    print_plain(message, file=sys.stderr)
    raise typer.Exit(code)
