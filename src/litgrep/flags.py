"""Search flags parsed from grep-style tokens."""

from collections.abc import Iterable
from typing import Self

from pydantic import BaseModel, ConfigDict

# token -> Flags field name
FLAG_TOKENS: dict[str, str] = {
    "-n": "line_numbers",
    "-l": "filenames_only",
    "-i": "case_insensitive",
    "-v": "invert_match",
    "-x": "match_entire_line",
}


class Flags(BaseModel):
    """Immutable set of behavioral switches for a single search."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    line_numbers: bool = False
    filenames_only: bool = False
    case_insensitive: bool = False
    invert_match: bool = False
    match_entire_line: bool = False

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> Self:
        """Build flags from tokens like ``-n`` or ``-i``. Unrecognized tokens are ignored."""
        present = set(tokens)
        return cls(**{field: token in present for token, field in FLAG_TOKENS.items()})

    def to_tokens(self) -> list[str]:
        """Return the enabled tokens in canonical order."""
        return [token for token, field in FLAG_TOKENS.items() if getattr(self, field)]
