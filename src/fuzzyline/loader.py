from __future__ import annotations
import logging
from typing import List

from .config import ENCODING
from .errors import DocumentUnreadable, QuerySourceUnreadable

log = logging.getLogger(__name__)


def read_lines(path: str) -> List[str]:
    """
    Read ``path`` into a list of lines without their EOL.
    Empty lines are kept so line numbers stay aligned with the file.
    Raises OSError if the file cannot be opened.
    """
    with open(path, "r", encoding=ENCODING, errors="ignore") as f:
        return [ln.rstrip("\r\n") for ln in f]


def read_document(path: str) -> List[str]:
    """Lines of the document to search; DocumentUnreadable if missing, unreadable or empty."""
    try:
        lines = read_lines(path)
    except OSError as exc:
        raise DocumentUnreadable(path, exc.strerror or str(exc)) from exc
    if not lines:
        raise DocumentUnreadable(path, "file has no lines")
    log.info("Read document %s: %d lines", path, len(lines))
    return lines


def read_queries(path: str) -> List[str]:
    """One query per line; QuerySourceUnreadable if missing, unreadable or empty."""
    try:
        lines = read_lines(path)
    except OSError as exc:
        raise QuerySourceUnreadable(path, exc.strerror or str(exc)) from exc
    if not lines:
        raise QuerySourceUnreadable(path, "file has no lines")
    log.info("Read %d queries from %s", len(lines), path)
    return lines
