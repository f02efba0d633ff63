"""Command-line entry point: ``litgrep [OPTIONS] PATTERN FILE...``."""

import importlib.metadata
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from .config import GrepConfig
from .dual_mode_output import SearchOutput
from .flags import FLAG_TOKENS, Flags
from .output import print_plain
from .search import search
from .utils import EXIT_MATCH, EXIT_NO_MATCH

PACKAGE_NAME = "litgrep"

app = typer.Typer(name=PACKAGE_NAME, add_completion=False, pretty_exceptions_enable=False)


def version_callback(value: bool) -> None:
    """Print the version and exit when --version is passed."""
    if value:
        print_plain(f"{PACKAGE_NAME}: {importlib.metadata.version(PACKAGE_NAME)}")
        raise typer.Exit


def setup_logging(*, verbose: bool) -> None:
    """Send DEBUG records to stderr through Rich when verbose, else warnings only."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def build_flags(config: GrepConfig | None, **switches: bool) -> Flags:
    """Merge config default tokens with command-line switches into flags.

    ``switches`` maps a flag token's field name (``line_numbers``, ...) to whether
    it was passed on the command line.
    """
    tokens = config.flags_model().to_tokens() if config else []
    tokens.extend(token for token, field in FLAG_TOKENS.items() if switches.get(field))
    return Flags.from_tokens(tokens)


@app.command()
def main(  # noqa: PLR0913 -- one parameter per CLI option
    pattern: Annotated[str, typer.Argument(help="Literal text to search for.")],
    files: Annotated[list[str], typer.Argument(help="Files to search, in output order.")],
    line_numbers: Annotated[bool, typer.Option("--line-number", "-n", help="Prefix each line with its line number.")] = False,
    filenames_only: Annotated[
        bool, typer.Option("--files-with-matches", "-l", help="Print only names of files with matches.")
    ] = False,
    case_insensitive: Annotated[bool, typer.Option("--ignore-case", "-i", help="Case-insensitive matching.")] = False,
    invert_match: Annotated[bool, typer.Option("--invert-match", "-v", help="Select non-matching lines.")] = False,
    match_entire_line: Annotated[bool, typer.Option("--line-regexp", "-x", help="Match only whole lines.")] = False,
    config: Annotated[Path | None, typer.Option("--config", "-c", help="TOML file with default flags.")] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Print a JSON envelope instead of lines.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", help="Log progress to stderr.")] = False,
    _version: Annotated[
        bool | None,
        typer.Option("--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."),
    ] = None,
) -> None:
    """Print lines of FILES that contain PATTERN as literal text."""
    setup_logging(verbose=verbose)
    cfg = GrepConfig.load_or_exit(config) if config else None
    flags = build_flags(
        cfg,
        line_numbers=line_numbers,
        filenames_only=filenames_only,
        case_insensitive=case_insensitive,
        invert_match=invert_match,
        match_entire_line=match_entire_line,
    )
    out = SearchOutput(json_mode=json_output or (cfg is not None and cfg.output == "json"))

    result = search(pattern, flags, files)
    if result.is_err():
        context = result.context or {}
        out.print_error_and_exit(str(result.error), f"{context.get('file')}: {context.get('message')}")

    matches = result.unwrap()
    out.matches(matches)
    raise typer.Exit(EXIT_MATCH if matches else EXIT_NO_MATCH)
