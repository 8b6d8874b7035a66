from __future__ import annotations
from collections import Counter

from .config import BREAK_CHARS


def is_break(ch: str) -> bool:
    """Spaces and the fixed punctuation set separate words; nothing else does."""
    return ch in BREAK_CHARS


def collapse_breaks(text: str) -> str:
    """
    Lower-case ``text`` and collapse every run of break characters to one space.
    Rules:
      * leading breaks are dropped (we start as if a break was just seen)
      * a trailing run becomes a single trailing space
      * non-break characters are copied through unchanged
    """
    out_chars: list[str] = []
    breaking = True
    for ch in text.lower():
        if not is_break(ch):
            out_chars.append(ch)
            breaking = False
        elif not breaking:
            out_chars.append(" ")
            breaking = True
    return "".join(out_chars)


def scan_line(text: str) -> tuple[Counter[str], Counter[str]]:
    """
    Single pass over the lower-cased line returning (word counts, char counts).

    Words are maximal runs of non-break characters. Every character is
    counted in the char table, break characters included.
    """
    words: Counter[str] = Counter()
    chars: Counter[str] = Counter()
    current: list[str] = []

    for ch in text.lower():
        chars[ch] += 1
        if is_break(ch):
            if current:
                words["".join(current)] += 1
                current = []
        else:
            current.append(ch)

    if current:
        words["".join(current)] += 1
    return words, chars
