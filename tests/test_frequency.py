import dataclasses
import pytest
from idea_summarizer.frequency import build_frequency_model


def test_term_frequency_over_corpus():
    model = build_frequency_model(["idea", "great", "idea"], [["idea"], ["great", "idea"]])
    assert model.term_frequency == {"idea": 2, "great": 1}
    assert model.total_tokens == 3
    assert model.sentence_count == 2

def test_doc_frequency_counts_every_occurrence():
    model = build_frequency_model([], [["idea", "idea", "great"], ["idea"]])
    assert model.sentence_doc_frequency == {"idea": 3, "great": 1}

def test_doc_frequency_deduped_per_sentence():
    model = build_frequency_model([], [["idea", "idea", "great"], ["idea"]], dedupe_per_sentence=True)
    assert model.sentence_doc_frequency == {"idea": 2, "great": 1}

def test_explicit_sentence_count():
    model = build_frequency_model(["word"], [["word"]], sentence_count=7)
    assert model.sentence_count == 7

def test_empty_inputs():
    model = build_frequency_model([], [])
    assert model.term_frequency == {}
    assert model.total_tokens == 0
    assert model.sentence_doc_frequency == {}
    assert model.sentence_count == 0

def test_model_is_immutable():
    model = build_frequency_model(["word"], [["word"]])
    with pytest.raises(dataclasses.FrozenInstanceError):
        model.total_tokens = 5
