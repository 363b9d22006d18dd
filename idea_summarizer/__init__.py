from .datatypes import Sentence, ScoredSentence, FrequencyModel, FrequencyTable
from .preprocessing import PreprocessConfig, split_sentences, tokenize, normalize
from .frequency import build_frequency_model
from .scoring import term_weight, score_sentence, score_sentences
from .summarize import summarize, summarize_ideas, select_top, DEFAULT_NUM_SENTENCES, SUMMARY_SEPARATOR
