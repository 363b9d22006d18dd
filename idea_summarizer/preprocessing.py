from __future__ import annotations
import re
import logging
from dataclasses import dataclass
from typing import List, Optional
from .datatypes import Sentence

logger = logging.getLogger(__name__)

RE_SENTENCE_END = re.compile(r"[.!?]+")   # a run of terminal marks is one split point
RE_PUNCT        = re.compile(r"[^A-Za-z0-9_\s]")  # ASCII word chars only; deleted, not replaced with a space
RE_WHITESPACE   = re.compile(r"\s+")

@dataclass
class PreprocessConfig:
    min_sentence_length: int = 20  # fragments must be strictly longer than this
    min_token_length: int = 4      # shorter tokens are noise words

    def __post_init__(self):
        if self.min_sentence_length < 0:
            raise ValueError(f"min_sentence_length must be >= 0, got {self.min_sentence_length}")
        if self.min_token_length < 1:
            raise ValueError(f"min_token_length must be >= 1, got {self.min_token_length}")

def split_sentences(text: str, cfg: Optional[PreprocessConfig] = None) -> List[Sentence]:
    """
    Split on runs of . ! ? and keep the trimmed fragments longer than
    cfg.min_sentence_length. idx is the position among the survivors.
    """
    cfg = cfg or PreprocessConfig()
    parts = [p.strip() for p in RE_SENTENCE_END.split(text)]
    kept = [p for p in parts if len(p) > cfg.min_sentence_length]
    logger.debug("split %d fragments, kept %d sentences", len(parts), len(kept))
    return [Sentence(idx=i, text=p) for i, p in enumerate(kept)]

def normalize(text: str) -> str:
    return RE_PUNCT.sub("", text.lower())

def tokenize(text: str, cfg: Optional[PreprocessConfig] = None) -> List[str]:
    cfg = cfg or PreprocessConfig()
    toks = RE_WHITESPACE.split(normalize(text))
    return [t for t in toks if len(t) >= cfg.min_token_length]
