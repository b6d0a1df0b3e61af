from __future__ import annotations
import threading
from typing import Callable, Iterable, List, Optional, Sequence, Tuple
from .config import NotesConfig
from .log import get_logger
from .notes import NOTE_PREFIXES, extract_notes
from .errors import ResourceUnavailable
from .summarizer import check_k, rank_notes, summarize
from .tagger import PartOfSpeechTagger, Token, build_tagger, tag_many

logger = get_logger(__name__)


class NotesPipeline:
    """text -> tagged tokens -> noun/verb notes -> top-k summary.

    Holds only the read-only tagger; every call builds its own counts, so one
    instance can serve concurrent messages.
    """

    def __init__(
        self,
        tagger: PartOfSpeechTagger,
        prefixes: Sequence[str] = NOTE_PREFIXES,
        normalize: Optional[Callable[[str], str]] = None,
        default_k: int = 5,
    ):
        self.tagger = tagger
        self.prefixes = tuple(prefixes)
        self.normalize = normalize
        self.default_k = default_k

    @classmethod
    def from_config(cls, cfg: NotesConfig) -> "NotesPipeline":
        return cls(
            build_tagger(cfg),
            prefixes=cfg.note_tag_prefixes,
            normalize=str.lower if cfg.lowercase else None,
            default_k=cfg.top_k,
        )

    def tag(self, text: str) -> List[Token]:
        return self.tagger.tag(text)

    def notes(self, text: str) -> List[str]:
        tokens = self.tagger.tag(text)
        notes = extract_notes(tokens, self.prefixes, self.normalize)
        logger.debug("tokens=%d notes=%d", len(tokens), len(notes))
        return notes

    def rank(self, text: str, k: Optional[int] = None) -> List[Tuple[str, int]]:
        return rank_notes(self.notes(text), self.default_k if k is None else k)

    def summarize(self, text: str, k: Optional[int] = None) -> str:
        return summarize(self.notes(text), self.default_k if k is None else k)

    def summarize_messages(self, messages: Iterable[str], k: Optional[int] = None) -> str:
        """Summarize a whole thread; counts are pooled across messages."""
        tokens = tag_many(self.tagger, messages)
        notes = extract_notes(tokens, self.prefixes, self.normalize)
        return summarize(notes, self.default_k if k is None else k)


_default_tagger: Optional[PartOfSpeechTagger] = None
_default_error: Optional[ResourceUnavailable] = None
_default_lock = threading.Lock()


def default_tagger() -> PartOfSpeechTagger:
    """Perceptron tagger shared by every summarize_text call.

    Call it at process start to load the models up front. It is built at most
    once: a load failure is kept and raised again without another attempt.
    """
    global _default_tagger, _default_error
    with _default_lock:
        if _default_error is not None:
            raise _default_error
        if _default_tagger is None:
            try:
                _default_tagger = build_tagger(NotesConfig())
            except ResourceUnavailable as ex:
                logger.error("Default tagger unavailable: %s", ex)
                _default_error = ex
                raise
        return _default_tagger


def summarize_text(raw_text: str, k: int = 5, tagger: Optional[PartOfSpeechTagger] = None) -> str:
    check_k(k)
    tagger = tagger or default_tagger()
    return summarize(extract_notes(tagger.tag(raw_text)), k)
