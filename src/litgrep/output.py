"""Low-level output functions for plain text and JSON."""

# ruff: noqa: T201 -- output layer

import json
import sys
from typing import TextIO


def print_plain(*messages: object, file: TextIO | None = None) -> None:
    """Print messages as-is, without Rich markup processing."""
    print(*messages, file=file or sys.stdout)


def print_json(data: object) -> None:
    """Print data as a single-line JSON document."""
    print(json.dumps(data, ensure_ascii=False))
