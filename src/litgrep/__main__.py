"""Run the CLI with ``python -m litgrep``."""

from .cli import app

app()
