from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import json
from pathlib import Path
from .errors import InvalidArgument

DEFAULT_PREFIXES = ["NN", "VB"]


def _from_dict(data: Dict[str, Any]) -> "NotesConfig":
    top_k = data.get("top_k", 5)
    if isinstance(top_k, bool) or not isinstance(top_k, int):
        raise InvalidArgument(f"top_k must be an integer, got {top_k!r}")
    prefixes = data.get("note_tag_prefixes") or DEFAULT_PREFIXES
    if not isinstance(prefixes, list) or not all(isinstance(p, str) and p for p in prefixes):
        raise InvalidArgument(f"note_tag_prefixes must be a list of tag prefixes, got {prefixes!r}")
    cfg = NotesConfig(
        top_k=top_k,
        tagger=data.get("tagger", "perceptron"),
        note_tag_prefixes=list(prefixes),
        lowercase=bool(data.get("lowercase", False)),
        nltk_data_dir=data.get("nltk_data_dir"),
        download_missing=bool(data.get("download_missing", False)),
        lexicon=dict(data.get("lexicon", {}) or {}),
        log_level=data.get("log_level", "INFO"),
    )
    if cfg.top_k < 0:
        raise InvalidArgument(f"top_k must be >= 0, got {cfg.top_k}")
    return cfg


@dataclass
class NotesConfig:
    top_k: int = 5
    tagger: str = "perceptron"  # "perceptron" | "lexicon"
    note_tag_prefixes: List[str] = field(default_factory=lambda: list(DEFAULT_PREFIXES))
    lowercase: bool = False
    nltk_data_dir: Optional[str] = None
    download_missing: bool = False
    lexicon: Dict[str, str] = field(default_factory=dict)  # extra word -> tag for "lexicon"
    log_level: str = "INFO"

    @staticmethod
    def load(path: Path) -> "NotesConfig":
        return _from_dict(json.loads(Path(path).read_text()))

    @staticmethod
    def load_json_str(s: str) -> "NotesConfig":
        return _from_dict(json.loads(s))

    def dump(self) -> str:
        data = {
            "top_k": self.top_k,
            "tagger": self.tagger,
            "note_tag_prefixes": self.note_tag_prefixes,
            "lowercase": self.lowercase,
            "nltk_data_dir": self.nltk_data_dir,
            "download_missing": self.download_missing,
            "lexicon": self.lexicon,
            "log_level": self.log_level,
        }
        return json.dumps(data, indent=2)


def write_default_config(path: Path) -> None:
    if path.exists():
        raise FileExistsError(f"{path} already exists")
    path.write_text(NotesConfig().dump())
