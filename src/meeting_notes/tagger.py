from __future__ import annotations
from typing import Dict, Iterable, List, NamedTuple, Optional, Protocol, runtime_checkable
import nltk
from nltk.tag import RegexpTagger, UnigramTagger
from nltk.tokenize import RegexpTokenizer
from .config import NotesConfig
from .errors import InvalidArgument, ResourceUnavailable
from .log import get_logger

logger = get_logger(__name__)

# nltk renamed these packages in 3.8.2 / 3.9; fetch both spellings
NLTK_PACKAGES = (
    "punkt",
    "punkt_tab",
    "averaged_perceptron_tagger",
    "averaged_perceptron_tagger_eng",
)


class Token(NamedTuple):
    text: str
    tag: str


@runtime_checkable
class PartOfSpeechTagger(Protocol):
    def tag(self, text: str) -> List[Token]:
        ...


class PerceptronTagger:
    """
    Penn Treebank tagging through nltk's pretrained models:
    - word_tokenize (punkt) for segmentation
    - pos_tag (averaged perceptron) for tags

    Models are probed once in __init__; a missing package raises
    ResourceUnavailable here instead of on the first message.
    """

    name = "perceptron"

    def __init__(self, data_dir: Optional[str] = None, download_missing: bool = False):
        if data_dir and data_dir not in nltk.data.path:
            nltk.data.path.insert(0, data_dir)
        try:
            self._probe()
        except LookupError as ex:
            if not download_missing:
                raise ResourceUnavailable(f"nltk tagging data not installed: {ex}") from ex
            logger.info("Downloading nltk packages: %s", ", ".join(NLTK_PACKAGES))
            for pkg in NLTK_PACKAGES:
                nltk.download(pkg, download_dir=data_dir, quiet=True)
            try:
                self._probe()
            except LookupError as ex2:
                raise ResourceUnavailable(f"nltk tagging data unavailable after download: {ex2}") from ex2

    @staticmethod
    def _probe() -> None:
        nltk.pos_tag(nltk.word_tokenize("The probe sentence loads the models."))

    def tag(self, text: str) -> List[Token]:
        if not text or not text.strip():
            return []
        return [Token(w, t) for w, t in nltk.pos_tag(nltk.word_tokenize(text))]


# closed-class words and a few frequent adverbs/adjectives; open-class words
# fall through to the suffix rules below
BASE_LEXICON: Dict[str, str] = {
    **dict.fromkeys(["the", "a", "an", "this", "these", "those", "no", "all", "some",
                     "any", "each", "every", "another", "both", "either", "neither"], "DT"),
    **dict.fromkeys(["i", "we", "you", "he", "she", "it", "they", "me", "us", "him",
                     "them", "myself", "ourselves", "yourself", "itself", "themselves"], "PRP"),
    **dict.fromkeys(["my", "our", "your", "his", "her", "its", "their"], "PRP$"),
    **dict.fromkeys(["of", "in", "on", "at", "for", "with", "from", "by", "about", "into",
                     "over", "after", "before", "during", "under", "between", "through",
                     "without", "within", "as", "than", "that", "if", "because", "while",
                     "although", "though", "until", "unless", "since", "per", "via"], "IN"),
    **dict.fromkeys(["and", "or", "but", "nor", "yet", "plus"], "CC"),
    **dict.fromkeys(["will", "would", "can", "could", "should", "may", "might", "must",
                     "shall", "ca", "wo"], "MD"),
    **dict.fromkeys(["very", "well", "not", "n't", "also", "just", "still", "already",
                     "again", "soon", "then", "now", "here", "too", "quite", "rather",
                     "almost", "always", "never", "often", "only", "so", "even", "ever",
                     "maybe", "perhaps", "later", "today", "tomorrow", "yesterday"], "RB"),
    **dict.fromkeys(["good", "great", "new", "next", "last", "first", "other", "same",
                     "few", "many", "much", "more", "most", "big", "small", "high", "low",
                     "important", "final", "early", "late", "main", "own", "such"], "JJ"),
    **dict.fromkeys(["who", "whom", "what"], "WP"),
    **dict.fromkeys(["when", "where", "why", "how"], "WRB"),
    **dict.fromkeys(["yes", "ok", "okay", "oh", "hi", "hello", "thanks"], "UH"),
    "which": "WDT", "whose": "WP$", "there": "EX", "to": "TO", "up": "RP",
    "is": "VBZ", "are": "VBP", "am": "VBP", "was": "VBD", "were": "VBD", "be": "VB",
    "been": "VBN", "being": "VBG", "has": "VBZ", "have": "VBP", "had": "VBD",
    "do": "VBP", "does": "VBZ", "did": "VBD",
    "family": "NN", "reply": "NN", "supply": "NN", "apply": "VB", "july": "NNP",
}

SUFFIX_RULES = [
    (r"^[^\w\s]+$", "."),
    (r"^-?\d+(?:[.,:]\d+)*$", "CD"),
    (r"^\w{3,}ly$", "RB"),
    (r"^\w{3,}ing$", "VBG"),
    (r"^\w{3,}ed$", "VBD"),
    (r"^\w+(?:ous|ful|less|able|ible)$", "JJ"),
    (r".*", "NN"),
]

# Treebank-like split: "can't" -> "ca" + "n't", punctuation runs kept together
_TOKEN_PATTERN = r"\w+(?=n't)|n't|\w+(?:[-']\w+)*|[^\w\s]+"


class LexiconTagger:
    """Tagger that needs no downloaded data: lexicon lookup with suffix backoff."""

    name = "lexicon"

    def __init__(self, extra: Optional[Dict[str, str]] = None):
        model = dict(BASE_LEXICON)
        model.update({k.lower(): v for k, v in (extra or {}).items()})
        self._tokenizer = RegexpTokenizer(_TOKEN_PATTERN)
        self._tagger = UnigramTagger(model=model, backoff=RegexpTagger(SUFFIX_RULES))

    def tag(self, text: str) -> List[Token]:
        if not text or not text.strip():
            return []
        words = self._tokenizer.tokenize(text)
        tagged = self._tagger.tag([w.lower() for w in words])
        return [Token(w, t) for w, (_, t) in zip(words, tagged)]


TAGGERS = ("perceptron", "lexicon")


def build_tagger(cfg: NotesConfig) -> PartOfSpeechTagger:
    if cfg.tagger == "perceptron":
        tagger: PartOfSpeechTagger = PerceptronTagger(cfg.nltk_data_dir, cfg.download_missing)
    elif cfg.tagger == "lexicon":
        tagger = LexiconTagger(cfg.lexicon)
    else:
        raise InvalidArgument(f"unknown tagger {cfg.tagger!r}, expected one of {', '.join(TAGGERS)}")
    logger.info("Loaded %s tagger", cfg.tagger)
    return tagger


def tag_many(tagger: PartOfSpeechTagger, texts: Iterable[str]) -> List[Token]:
    out: List[Token] = []
    for t in texts:
        out.extend(tagger.tag(t))
    return out
