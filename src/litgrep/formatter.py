"""Rendering of matched lines into output strings."""

from .flags import Flags


def format_result(file_name: str, line_number: int, line: str, flags: Flags, total_file_count: int) -> str:
    """Render a matched line according to the output flags and number of searched files."""
    if flags.filenames_only:
        return file_name

    # File name prefix only disambiguates when more than one file is searched
    multiple_files = total_file_count > 1
    if flags.line_numbers:
        if multiple_files:
            return f"{file_name}:{line_number}:{line}"
        return f"{line_number}:{line}"

    if multiple_files:
        return f"{file_name}:{line}"
    return line
