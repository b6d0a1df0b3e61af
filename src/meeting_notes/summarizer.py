from __future__ import annotations
from typing import Iterable, List, Tuple
from collections import Counter
from .errors import InvalidArgument


def check_k(k) -> None:
    if isinstance(k, bool) or not isinstance(k, int):
        raise InvalidArgument(f"k must be an integer, got {type(k).__name__}")
    if k < 0:
        raise InvalidArgument(f"k must be >= 0, got {k}")


def rank_notes(notes: Iterable[str], k: int = 5) -> List[Tuple[str, int]]:
    """
    Top-k distinct notes with their counts:
    - count per surface text (Counter keeps first-seen order)
    - stable sort on descending count, so ties stay in first-occurrence order
    """
    check_k(k)
    if k == 0:
        return []
    freq = Counter(notes)
    # equal counts keep first-occurrence order
    return sorted(freq.items(), key=lambda x: -x[1])[:k]


def summarize(notes: Iterable[str], k: int = 5) -> str:
    return " ".join(w for w, _ in rank_notes(notes, k))
