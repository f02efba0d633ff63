"""Line matching under literal-pattern semantics."""

from .flags import Flags


def matches(line: str, pattern: str, flags: Flags) -> bool:
    """Check whether a single line satisfies the pattern under the given flags.

    The pattern is literal text: a substring by default, or the whole line when
    ``match_entire_line`` is set. Case folding is applied to both sides before
    comparison; ``invert_match`` negates the outcome.
    """
    if flags.case_insensitive:
        line = line.lower()
        pattern = pattern.lower()

    matched = line == pattern if flags.match_entire_line else pattern in line
    return matched != flags.invert_match
