# src/fuzzyline/models.py
"""
Data models for the line finder.

- IndexedLine: one retained document line, its original 0-based index and
  its fingerprint.
- FindResult: the result object handed to the CLI and web frontends.

These classes carry no scoring logic; they only structure the data passed
between the document scan and the drivers.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from .wordset import WordSet


@dataclass(frozen=True, slots=True)
class IndexedLine:
    """
    A non-empty line of the document.

    Attributes
    ----------
    index : int
        0-based position in the ORIGINAL line list, empty lines included.
        Never shifted by the removal of empty lines.
    text : str
        The line exactly as read (without trailing EOL).
    wordset : WordSet
        Fingerprint built once from ``text``.
    """
    index: int
    text: str
    wordset: "WordSet"


@dataclass(frozen=True, slots=True)
class FindResult:
    """
    One match returned by Engine.find() / Engine.rank().

    Attributes
    ----------
    index : int
        0-based line index in the original document.
    line : str
        The matched line verbatim.
    score : float
        Containment score of the query against the line, roughly in [-1, 1].
    """
    index: int
    line: str
    score: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
