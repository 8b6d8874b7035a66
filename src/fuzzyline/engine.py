# fuzzyline/engine.py
from __future__ import annotations

import logging
import time
from typing import Iterable, List, Optional

from . import config as CFG
from .document import Document
from .errors import EmptyCorpus
from .loader import read_document
from .models import FindResult
from .wordset import ScoringPolicy, WordSet

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - reading the document (loader.read_document),
      - preprocessing it once into a Document of line fingerprints,
      - answering queries against it.

    Public API (used by CLI/Flask):
      * load(path):              read a document file -> Document
      * load_lines(lines, ...):  same, from lines already in memory
      * find(query):             best line as a FindResult
      * find_all(queries):       find() for each query, in order
      * rank(query, top_k):      best top_k lines
      * line(index):             original text of a line (empty lines too)
      * shutdown():              drop the loaded document
    """

    # ------------- lifecycle -------------

    def __init__(self, policy: Optional[ScoringPolicy | str] = None, *, verbose: bool = False) -> None:
        self.policy = ScoringPolicy.coerce(policy)
        self.document: Optional[Document] = None
        self._lines: List[str] = []
        if verbose or CFG.VERBOSE:
            logging.basicConfig(level=logging.INFO)

    # /* ~~~ Read a document from disk and preprocess it ~~~ */
    def load(self, path: str) -> None:
        log.info("Loading document from %s", path)
        self.load_lines(read_document(path), source=path)

    # /* ~~~ Preprocess lines that are already in memory ~~~ */
    def load_lines(self, lines: Iterable[str], *, source: str = "<memory>") -> None:
        t0 = time.perf_counter()
        lines = list(lines)
        document = Document(lines, policy=self.policy, source=source)
        if len(document) == 0:
            raise EmptyCorpus(source)

        self._lines = lines
        self.document = document
        log.info("Engine load complete: lines=%d searchable=%d policy=%s in %.3fs",
                 len(lines), len(document), self.policy.value, time.perf_counter() - t0)

    @property
    def loaded(self) -> bool:
        return self.document is not None

    # ------------- query -------------

    def find(self, query: str) -> FindResult:
        doc = self._require()
        index, score = doc.fuzzy_find_scored(WordSet(query))
        return FindResult(index=index, line=self._lines[index], score=score)

    def find_all(self, queries: Iterable[str]) -> List[FindResult]:
        return [self.find(q) for q in queries]

    def rank(self, query: str, *, top_k: int = CFG.TOP_K) -> List[FindResult]:
        return self._require().rank(WordSet(query), top_k=top_k)

    def line(self, index: int) -> str:
        self._require()
        if index < 0:
            raise IndexError(f"line index must be non-negative, got {index}")
        return self._lines[index]

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.document = None
        self._lines = []
        log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _require(self) -> Document:
        if self.document is None:
            raise RuntimeError("Engine not initialized. Call load() or load_lines() first.")
        return self.document
