"""Dual-mode (JSON / plain) rendering of search results."""

from typing import NoReturn

import typer

from .output import print_json, print_plain
from .utils import EXIT_ERROR, fatal


class SearchOutput:
    """Output handler for search results supporting JSON and plain modes.

    JSON mode prints a single envelope (``{"ok": true, "data": {"matches": [...]}}``).
    Plain mode prints one result per line, untouched by any markup rendering,
    so lines containing brackets or escape-like text come out verbatim.
    """

    def __init__(self, *, json_mode: bool) -> None:
        """Initialize output handler.

        Args:
            json_mode: If True, output JSON envelopes; otherwise one result per line.

        """
        self.json_mode = json_mode

    def matches(self, results: list[str]) -> None:
        """Output the ordered search results."""
        if self.json_mode:
            print_json({"ok": True, "data": {"matches": results}})
            return
        for line in results:
            print_plain(line)

    def print_error_and_exit(self, code: str, message: str) -> NoReturn:
        """Print an error in JSON or plain format and exit with the error code."""
        if self.json_mode:
            print_json({"ok": False, "error": code, "message": message})
            raise typer.Exit(EXIT_ERROR)
        fatal(f"litgrep: {message}")
