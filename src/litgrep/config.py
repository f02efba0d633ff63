"""TOML-based default settings with Pydantic validation."""

import tomllib
from pathlib import Path
from typing import Literal, Self

from mm_result import Result
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .flags import Flags
from .utils import fatal


class GrepConfig(BaseModel):
    """Defaults applied to every search run from the command line.

    Example file::

        flags = ["-i", "-n"]
        output = "json"

    """

    model_config = ConfigDict(extra="forbid")

    flags: list[str] = Field(default_factory=list)
    output: Literal["plain", "json"] = "plain"

    @classmethod
    def load(cls, path: Path) -> Result[Self]:
        """Load and validate config from a TOML file."""
        try:
            with path.expanduser().open("rb") as f:
                data = tomllib.load(f)
            return Result.ok(cls(**data))
        except ValidationError as e:
            return Result.err(("validation_error", e), context={"errors": e.errors()})
        except Exception as e:
            return Result.err(e)

    @classmethod
    def load_or_exit(cls, path: Path) -> Self:
        """Load and validate config. Print error and exit on failure."""
        result = cls.load(path)
        if result.is_ok():
            return result.unwrap()
        if result.error == "validation_error" and result.context:
            lines = ["config validation errors"]
            for e in result.context["errors"]:
                loc = e["loc"]
                field = ".".join(str(part) for part in loc) if loc else ""
                lines.append(f"  {field}: {e['msg']}")
            fatal("\n".join(lines))
        # file not found, TOML parse error, etc.
        fatal(f"can't load config: {result.error}")

    def flags_model(self) -> Flags:
        """Build search flags from the configured tokens."""
        return Flags.from_tokens(self.flags)
