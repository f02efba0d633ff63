"""Literal line matching across text files."""

from .config import GrepConfig as GrepConfig
from .dual_mode_output import SearchOutput as SearchOutput
from .flags import Flags as Flags
from .formatter import format_result as format_result
from .matcher import matches as matches
from .search import SearchError as SearchError
from .search import search as search
from .search import search_or_raise as search_or_raise
