from __future__ import annotations
from collections import Counter
from typing import Iterable, List, Optional, Sequence
from .datatypes import FrequencyModel

def _term_frequency(tokens: Iterable[str]) -> Counter:
    return Counter(tokens)

def _sentence_doc_frequency(sentence_tokens: Sequence[List[str]],
                            dedupe_per_sentence: bool = False) -> Counter:
    """
    Counts how often a token turns up while scanning every sentence.

    With dedupe_per_sentence=False a token repeated inside one sentence is
    counted once per occurrence, so the count can exceed the number of
    sentences and drive log(N/DF) below zero. dedupe_per_sentence=True
    gives the textbook DF (number of sentences containing the token).
    """
    df = Counter()
    for toks in sentence_tokens:
        df.update(set(toks) if dedupe_per_sentence else toks)
    return df

def build_frequency_model(corpus_tokens: Sequence[str],
                          sentence_tokens: Sequence[List[str]],
                          sentence_count: Optional[int] = None,
                          dedupe_per_sentence: bool = False) -> FrequencyModel:
    if sentence_count is None:
        sentence_count = len(sentence_tokens)
    return FrequencyModel(
        term_frequency=dict(_term_frequency(corpus_tokens)),
        total_tokens=len(corpus_tokens),
        sentence_doc_frequency=dict(_sentence_doc_frequency(sentence_tokens, dedupe_per_sentence)),
        sentence_count=sentence_count,
    )
