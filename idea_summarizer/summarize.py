from __future__ import annotations
import logging
import numbers
from typing import Iterable, List, Optional, Sequence
from .datatypes import ScoredSentence
from .preprocessing import PreprocessConfig, split_sentences, tokenize
from .frequency import build_frequency_model
from .scoring import score_sentences

logger = logging.getLogger(__name__)

DEFAULT_NUM_SENTENCES = 5
SUMMARY_SEPARATOR = "\n\n"

def select_top(scored: Sequence[ScoredSentence], n: int) -> List[str]:
    # sorted() is stable, so equal scores keep their original order
    if n <= 0:
        return []
    ranked = sorted(scored, key=lambda s: s.score, reverse=True)
    return [s.text for s in ranked[:n]]

def summarize(text: str,
              num_sentences: int = DEFAULT_NUM_SENTENCES,
              cfg: Optional[PreprocessConfig] = None,
              dedupe_per_sentence: bool = False) -> str:
    """
    Extractive summary of `text`: the `num_sentences` highest scoring
    sentences, best first, separated by blank lines.

    If no more than `num_sentences` sentences survive the length filter the
    input is returned unchanged.
    """
    if isinstance(num_sentences, bool) or not isinstance(num_sentences, numbers.Integral):
        raise TypeError(f"num_sentences must be an int, got {type(num_sentences).__name__}")
    num_sentences = int(num_sentences)
    cfg = cfg or PreprocessConfig()

    sentences = split_sentences(text, cfg)
    if len(sentences) <= num_sentences:
        logger.debug("%d sentences <= %d requested, returning text as is", len(sentences), num_sentences)
        return text
    if num_sentences <= 0:
        return ""

    model = build_frequency_model(
        tokenize(text, cfg),
        [tokenize(s.text, cfg) for s in sentences],
        sentence_count=len(sentences),
        dedupe_per_sentence=dedupe_per_sentence,
    )
    scored = score_sentences(sentences, model, cfg)
    selected = select_top(scored, num_sentences)
    logger.debug("selected %d of %d sentences", len(selected), len(sentences))
    return SUMMARY_SEPARATOR.join(selected)

def summarize_ideas(ideas: Iterable[str], num_sentences: int = DEFAULT_NUM_SENTENCES, **kwargs) -> str:
    # ideas are joined as paragraphs before summarizing
    return summarize(SUMMARY_SEPARATOR.join(ideas), num_sentences, **kwargs)
