from __future__ import annotations
from typing import Iterable, Iterator, List, Optional, Tuple

from . import config as CFG
from .errors import EmptyCorpus
from .models import FindResult, IndexedLine
from .wordset import ScoringPolicy, WordSet


class Document:
    """
    Fingerprints for every non-empty line of a text, built once.

    Empty lines are skipped but keep their place in the numbering, so the
    index returned by fuzzy_find() points into the ORIGINAL line list.
    """

    def __init__(self, lines: Iterable[str],
                 policy: Optional[ScoringPolicy | str] = None,
                 source: str = "<document>") -> None:
        self.policy = ScoringPolicy.coerce(policy)
        self.source = source
        self._lines: Tuple[IndexedLine, ...] = tuple(
            IndexedLine(index=i, text=line, wordset=WordSet(line))
            for i, line in enumerate(lines)
            if len(line) > 0
        )

    @classmethod
    def build(cls, lines: Iterable[str], **kwargs) -> "Document":
        return cls(lines, **kwargs)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[IndexedLine]:
        return iter(self._lines)

    def _as_wordset(self, query: WordSet | str) -> WordSet:
        if not self._lines:
            raise EmptyCorpus(self.source)
        return query if isinstance(query, WordSet) else WordSet(query)

    def fuzzy_find(self, query: WordSet | str) -> int:
        """Return the original index of the line that best contains ``query``."""
        return self.fuzzy_find_scored(query)[0]

    def fuzzy_find_scored(self, query: WordSet | str) -> Tuple[int, float]:
        """
        Linear scan returning (index, score) of the best line.

        Ties keep the earliest line. A perfect score (exactly 1.0) ends the
        scan immediately.
        """
        ws = self._as_wordset(query)
        best_index = self._lines[0].index
        best_score: Optional[float] = None
        for entry in self._lines:
            score = entry.wordset.measure_containment(ws, self.policy)
            if score == 1.0:
                return entry.index, score
            if best_score is None or score > best_score:
                best_index, best_score = entry.index, score
        return best_index, best_score  # type: ignore[return-value]

    def rank(self, query: WordSet | str, top_k: int = CFG.TOP_K) -> List[FindResult]:
        """Score every line and return the best ``top_k`` (score desc, index asc)."""
        ws = self._as_wordset(query)
        rows = [
            FindResult(index=entry.index, line=entry.text,
                       score=entry.wordset.measure_containment(ws, self.policy))
            for entry in self._lines
        ]
        rows.sort(key=lambda r: (-r.score, r.index))
        return rows[:max(0, int(top_k))]
