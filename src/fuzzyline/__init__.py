"""
Fuzzy Line Finder

Finds the line of a document that most closely resembles a query phrase,
tolerating typos, reordered words and partial phrasing.

Each non-empty line is turned once into a WordSet (word counts, character
counts and a break-collapsed form of the line). A query is turned into a
WordSet too and scored against every line; the best line wins, and an exact
match stops the scan early.

Main entry points:
    Document(lines).fuzzy_find(query)   index of the best line
    Engine().load(path); .find(query)   file-backed, returns a FindResult

Example Usage:
    from fuzzyline import Document

    doc = Document(["The quick brown fox", "jumps over", "the lazy dog"])
    doc.fuzzy_find("quick fox")   # -> 0
"""

# src/fuzzyline/__init__.py
from .wordset import WordSet, ScoringPolicy, containment, longest_common_run  # re-export
from .document import Document
from .engine import Engine
from .models import FindResult, IndexedLine
from .errors import FuzzyLineError, DocumentUnreadable, QuerySourceUnreadable, EmptyCorpus

__version__ = "1.0.0"
__all__ = [
    "WordSet", "ScoringPolicy", "containment", "longest_common_run",
    "Document", "Engine", "FindResult", "IndexedLine",
    "FuzzyLineError", "DocumentUnreadable", "QuerySourceUnreadable", "EmptyCorpus",
]
