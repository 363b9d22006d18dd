from __future__ import annotations
import math
from typing import List, Optional, Sequence
from .datatypes import FrequencyModel, ScoredSentence, Sentence
from .preprocessing import PreprocessConfig, tokenize

def term_weight(token: str, model: FrequencyModel) -> float:
    """
    TF-IDF weight of one token occurrence.

    TF  = corpus count / total corpus tokens
    IDF = ln(N / DF), N = number of kept sentences, DF defaults to 1
    """
    if model.total_tokens == 0 or model.sentence_count == 0:
        return 0.0
    tf = model.term_frequency.get(token, 0) / model.total_tokens
    if tf == 0.0:
        return 0.0
    df = model.sentence_doc_frequency.get(token) or 1
    return tf * math.log(model.sentence_count / df)

def score_sentence(tokens: Sequence[str], model: FrequencyModel) -> float:
    score = 0.0
    for t in tokens:
        score += term_weight(t, model)
    return score

def score_sentences(sentences: Sequence[Sentence],
                    model: FrequencyModel,
                    cfg: Optional[PreprocessConfig] = None) -> List[ScoredSentence]:
    cfg = cfg or PreprocessConfig()
    return [
        ScoredSentence(idx=s.idx, text=s.text, score=score_sentence(tokenize(s.text, cfg), model))
        for s in sentences
    ]
