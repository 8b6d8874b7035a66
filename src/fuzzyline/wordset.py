"""
Line fingerprints and the containment score between them.

A WordSet is built once per line. It keeps:
  - the line lower-cased with break runs collapsed (for exact and run matching)
  - a word -> count table
  - a character -> count table (break characters included)

measure_containment() asks "how well is the other line found inside this one"
and returns a float in roughly [-1, 1], where 1.0 means a perfect match.
"""

from __future__ import annotations
from enum import Enum
from types import MappingProxyType
from typing import Hashable, Mapping, Optional

from .config import DEFAULT_POLICY
from .normalize import collapse_breaks, scan_line


class ScoringPolicy(str, Enum):
    """How the sub-scores of measure_containment() are combined."""

    SHARED = "shared"      # (words + chars + full run + word runs) / 4
    WEIGHTED = "weighted"  # (2 * words + chars) / 3

    @classmethod
    def coerce(cls, value: "ScoringPolicy | str | None") -> "ScoringPolicy":
        if value is None:
            return cls(DEFAULT_POLICY)
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise ValueError(f"unknown scoring policy {value!r} (expected one of: {choices})") from None


# ---------- similarity helpers ----------

def containment(t1: Mapping[Hashable, int], t2: Mapping[Hashable, int]) -> float:
    """
    Score how well the items of ``t2`` are found, with matching counts, in ``t1``.

    found/possible both start at 1. A missing item subtracts its count from
    found; a present one adds the smaller count to found and the larger to
    possible, so overshooting the reference count is punished less than
    missing it. Identical tables return 1.0.
    """
    found = 1.0
    possible = 1.0
    if t1 != t2:
        for key, count in t2.items():
            have = t1.get(key)
            if have is None:
                found -= count
                possible += count
            elif count <= have:
                found += count
                possible += have
            else:
                found += have
                possible += count
    return found / possible


def longest_common_run(a: str, b: str) -> int:
    """Length of the longest contiguous run of characters shared by ``a`` and ``b``."""
    if not a or not b:
        return 0
    longest = 0
    prev = [0] * (len(b) + 1)
    for ca in a:
        cur = [0] * (len(b) + 1)
        for j, cb in enumerate(b, start=1):
            if ca == cb:
                run = prev[j - 1] + 1
                cur[j] = run
                if run > longest:
                    longest = run
        prev = cur
    return longest


def shared_ratio(a: str, b: str) -> float:
    """
    Longest common run divided by the average length of the two strings.

    Using the average (not the shorter length) keeps a substring from
    counting as a perfect match.
    """
    size_sum = len(a) + len(b)
    if size_sum == 0:
        return 0.0
    return 2 * longest_common_run(a, b) / size_sum


def words_shared_ratio(a: Mapping[str, int], b: Mapping[str, int]) -> float:
    """Average, over the words of ``b``, of the best shared_ratio against any word of ``a``."""
    if not b:
        return 0.0
    total = 0.0
    for word in b:
        total += max((shared_ratio(mine, word) for mine in a), default=0.0)
    return total / len(b)


# ---------- fingerprint ----------

class WordSet:
    """Immutable fingerprint of one line of text."""

    __slots__ = ("_line", "_normalized", "_words", "_chars")

    def __init__(self, line: str) -> None:
        words, chars = scan_line(line)
        self._line = line
        self._normalized = collapse_breaks(line)
        self._words = words
        self._chars = chars

    @property
    def line(self) -> str:
        return self._line

    @property
    def normalized(self) -> str:
        return self._normalized

    @property
    def words(self) -> Mapping[str, int]:
        return MappingProxyType(self._words)

    @property
    def chars(self) -> Mapping[str, int]:
        return MappingProxyType(self._chars)

    def measure_containment(self, other: "WordSet",
                            policy: Optional[ScoringPolicy | str] = None) -> float:
        """
        Score how well ``other`` is contained in this line.

        Identical normalized lines short-circuit to exactly 1.0. Otherwise
        word and char containment are combined with the run-length terms
        (SHARED) or weighted 2:1 (WEIGHTED).
        """
        if self._normalized == other._normalized:
            return 1.0

        words = containment(self._words, other._words)
        chars = containment(self._chars, other._chars)

        if ScoringPolicy.coerce(policy) is ScoringPolicy.WEIGHTED:
            return (2 * words + chars) / 3

        full_shared = shared_ratio(self._normalized, other._normalized) * 2 - 1
        word_shared = words_shared_ratio(self._words, other._words) * 2 - 1
        return (words + chars + full_shared + word_shared) / 4

    def __repr__(self) -> str:
        return f"WordSet({self._line!r})"
