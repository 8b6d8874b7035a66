from __future__ import annotations
import os

# Characters that separate words. Everything else is part of a word.
BREAK_CHARS: frozenset[str] = frozenset(" (),.!:;\"“‘’”—")

# Document used by interactive mode when -d is not given
DEFAULT_DOCUMENT: str = "./lepanto.txt"

# Reading
ENCODING: str = "utf-8"

# Scoring: "shared" (four-term average) or "weighted" (2:1 words:chars)
DEFAULT_POLICY: str = "shared"

# Rows returned by rank() / the web API when no k is given
TOP_K: int = 5

# Progress logging (set FUZZYLINE_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("FUZZYLINE_VERBOSE") == "1"
