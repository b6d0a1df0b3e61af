from __future__ import annotations
from typing import Callable, Iterable, List, Optional, Sequence
from .tagger import Token

NOTE_PREFIXES = ("NN", "VB")


def is_note(token: Token, prefixes: Sequence[str] = NOTE_PREFIXES) -> bool:
    return token.tag.startswith(tuple(prefixes))


def extract_notes(
    tokens: Iterable[Token],
    prefixes: Sequence[str] = NOTE_PREFIXES,
    normalize: Optional[Callable[[str], str]] = None,
) -> List[str]:
    """
    Keep noun and verb tokens (tag family matched by prefix), in input order,
    duplicates included. `normalize` is applied to each kept surface text;
    pass str.lower or a stemmer to merge forms like "Budget"/"budget".
    """
    prefixes = tuple(prefixes)
    out = [t.text for t in tokens if t.tag.startswith(prefixes)]
    if normalize is not None:
        out = [normalize(w) for w in out]
    return out
