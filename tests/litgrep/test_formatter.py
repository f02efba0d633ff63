"""Tests for result formatting."""

import pytest

from litgrep.flags import Flags
from litgrep.formatter import format_result


class TestPlain:
    """No output flags."""

    def test_single_file(self) -> None:
        """Line is returned unmodified."""
        assert format_result("a.txt", 1, "cats", Flags(), 1) == "cats"

    def test_multiple_files(self) -> None:
        """File name prefix is added."""
        assert format_result("b.txt", 1, "cats", Flags(), 2) == "b.txt:cats"


class TestLineNumbers:
    """``-n`` output."""

    def test_single_file(self) -> None:
        """Line number prefix only."""
        assert format_result("a.txt", 3, "cats", Flags(line_numbers=True), 1) == "3:cats"

    def test_multiple_files(self) -> None:
        """File name and line number prefix."""
        assert format_result("a.txt", 3, "cats", Flags(line_numbers=True), 2) == "a.txt:3:cats"

    def test_line_with_colons(self) -> None:
        """Colons inside the line are kept as-is."""
        assert format_result("a.txt", 12, "x:y:z", Flags(line_numbers=True), 1) == "12:x:y:z"


class TestFilenamesOnly:
    """``-l`` takes priority over everything else."""

    @pytest.mark.parametrize("total", [1, 2, 5])
    @pytest.mark.parametrize("line_numbers", [True, False])
    def test_returns_file_name(self, total: int, line_numbers: bool) -> None:
        """Only the file name, whatever the file count or ``-n``."""
        flags = Flags(filenames_only=True, line_numbers=line_numbers)
        assert format_result("a.txt", 7, "cats", flags, total) == "a.txt"


class TestMatchFlagsIgnored:
    """Matching switches don't affect rendering."""

    def test_case_and_invert(self) -> None:
        """Original line text is rendered regardless of ``-i``/``-v``/``-x``."""
        flags = Flags(case_insensitive=True, invert_match=True, match_entire_line=True)
        assert format_result("a.txt", 1, "MiXeD", flags, 1) == "MiXeD"
