"""Library usage: search files from Python and handle read errors."""

import sys
from pathlib import Path

from litgrep import Flags, SearchError, search, search_or_raise

files = sys.argv[1:] or [str(Path(__file__))]

# Result-based API: errors come back as values
result = search("search", Flags.from_tokens(["-n", "-i"]), files)
if result.is_err():
    print(f"error: {result.context}")
else:
    for line in result.unwrap():
        print(line)

# Exception-based API
try:
    names = search_or_raise("import", Flags(filenames_only=True), files)
except SearchError as e:
    print(f"can't search {e.file_name}: {e.reason}")
else:
    print("files importing something:", ", ".join(names))
