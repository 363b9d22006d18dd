from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict

FrequencyTable = Dict[str, int]  # token -> count

@dataclass(frozen=True)
class Sentence:
    idx: int   # position in the filtered sentence sequence
    text: str  # trimmed

@dataclass(frozen=True)
class ScoredSentence:
    idx: int
    text: str
    score: float

@dataclass(frozen=True)
class FrequencyModel:
    term_frequency: FrequencyTable = field(default_factory=dict)
    total_tokens: int = 0
    sentence_doc_frequency: FrequencyTable = field(default_factory=dict)  # occurrences while scanning sentences
    sentence_count: int = 0
