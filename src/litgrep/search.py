"""Search driver: scan files in order and collect formatted matches."""

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from mm_result import Result

from .flags import Flags
from .formatter import format_result
from .matcher import matches

logger = logging.getLogger(__name__)

type FileName = str | os.PathLike[str]


class SearchError(OSError):
    """Raised by ``search_or_raise`` when a file can't be opened or read."""

    def __init__(self, file_name: str, message: str) -> None:
        """Store the failing file name alongside the reason."""
        super().__init__(f"{file_name}: {message}")
        self.file_name = file_name
        self.reason = message


def search(pattern: str, flags: Flags, file_names: Sequence[FileName]) -> Result[list[str]]:
    """Search files for lines matching a literal pattern.

    Files are processed in the given order and lines in file order. The first
    file that can't be opened or decoded aborts the whole search: the result is
    an ``io_error`` and no partial matches are returned.

    Args:
        pattern: Literal text to look for.
        flags: Matching and output switches.
        file_names: Paths to search, in output order.

    Returns:
        Ok with the ordered output strings, or an ``io_error`` whose context
        holds the failing ``file`` and a human-readable ``message``.

    """
    results: list[str] = []
    total_file_count = len(file_names)
    for file_name in file_names:
        name = os.fspath(file_name)
        try:
            file_results = _search_file(pattern, flags, name, total_file_count)
        except (OSError, UnicodeDecodeError) as e:
            return Result.err(("io_error", e), context={"file": name, "message": _error_message(e)})
        logger.debug("%s: %d result(s)", name, len(file_results))
        results.extend(file_results)
    return Result.ok(results)


def search_or_raise(pattern: str, flags: Flags, file_names: Sequence[FileName]) -> list[str]:
    """Like ``search``, but raise ``SearchError`` instead of returning an error result."""
    result = search(pattern, flags, file_names)
    if result.is_err():
        context = result.context or {}
        raise SearchError(context.get("file", ""), context.get("message", str(result.error)))
    return result.unwrap()


def _search_file(pattern: str, flags: Flags, name: str, total_file_count: int) -> list[str]:
    """Collect the output strings for a single file."""
    found: list[str] = []
    logger.debug("scanning %s", name)
    # Binary mode: only LF ends a line, and each line is decoded on its own
    with Path(name).open("rb") as f:
        for line_number, raw_line in enumerate(f, start=1):
            line = _strip_line_ending(raw_line).decode("utf-8")
            if not matches(line, pattern, flags):
                continue
            if flags.filenames_only:
                found.append(name)
                break
            found.append(format_result(name, line_number, line, flags, total_file_count))
    return found


def _strip_line_ending(raw_line: bytes) -> bytes:
    """Drop a trailing ``\\n`` or ``\\r\\n``."""
    if raw_line.endswith(b"\n"):
        raw_line = raw_line[:-1]
        if raw_line.endswith(b"\r"):
            raw_line = raw_line[:-1]
    return raw_line


def _error_message(e: Exception) -> str:
    """Short reason for a failed open or read: ``strerror`` when the OS gave one."""
    if isinstance(e, OSError) and e.strerror:
        return e.strerror
    return str(e)
