"""Tests for the line matcher."""

import pytest

from litgrep.flags import Flags
from litgrep.matcher import matches

LINES = ["cats", "Cat", "dog", "", "concatenate", "CAT"]


class TestSubstring:
    """Default mode: literal substring containment."""

    @pytest.mark.parametrize("line", LINES)
    def test_equals_containment(self, line: str) -> None:
        """Match is exactly ``pattern in line``."""
        assert matches(line, "cat", Flags()) == ("cat" in line)

    def test_no_regex(self) -> None:
        """Regex metacharacters are literal text."""
        assert not matches("cats", "c.t", Flags())
        assert matches("a c.t here", "c.t", Flags())
        assert matches("price: $5 (approx)", "$5 (", Flags())

    def test_empty_pattern_matches_everything(self) -> None:
        """Empty pattern is contained in every line, including empty ones."""
        assert matches("anything", "", Flags())
        assert matches("", "", Flags())


class TestCaseInsensitive:
    """Case folding applies to both line and pattern."""

    @pytest.mark.parametrize(("line", "pattern"), [("CATS", "cat"), ("cats", "CAT"), ("CaTs", "cAt")])
    def test_folds_both_sides(self, line: str, pattern: str) -> None:
        """Mixed case on either side still matches."""
        assert matches(line, pattern, Flags(case_insensitive=True))
        assert not matches(line, pattern, Flags())


class TestEntireLine:
    """Whole-line mode: equality, not containment."""

    def test_substring_is_not_enough(self) -> None:
        """A line that merely contains the pattern doesn't match."""
        assert not matches("cats", "cat", Flags(match_entire_line=True))

    def test_exact_line(self) -> None:
        """Identical line matches."""
        assert matches("cat", "cat", Flags(match_entire_line=True))

    def test_case_insensitive(self) -> None:
        """Equality is checked after case folding."""
        assert matches("CAT", "cat", Flags(match_entire_line=True, case_insensitive=True))

    def test_empty_pattern_matches_only_empty_lines(self) -> None:
        """Empty pattern equals only the empty line."""
        flags = Flags(match_entire_line=True)
        assert matches("", "", flags)
        assert not matches(" ", "", flags)


class TestInvert:
    """Inversion negates the base result for every other flag combination."""

    @pytest.mark.parametrize("line", LINES)
    @pytest.mark.parametrize("tokens", [[], ["-i"], ["-x"], ["-i", "-x"], ["-n", "-l"]])
    def test_invert_law(self, line: str, tokens: list[str]) -> None:
        """``-v`` always flips the outcome."""
        base = Flags.from_tokens(tokens)
        inverted = Flags.from_tokens([*tokens, "-v"])
        assert matches(line, "cat", inverted) is not matches(line, "cat", base)

    def test_invert_with_entire_line(self) -> None:
        """Non-identical lines are selected under ``-x -v``."""
        flags = Flags(match_entire_line=True, invert_match=True)
        assert matches("cats", "cat", flags)
        assert not matches("cat", "cat", flags)
