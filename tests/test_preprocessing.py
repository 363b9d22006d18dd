import pytest
from idea_summarizer.preprocessing import PreprocessConfig, split_sentences, tokenize, normalize


def test_short_fragments_are_dropped():
    assert split_sentences("Short one.") == []

def test_length_threshold_is_strict():
    text = "a" * 20 + ". " + "b" * 21 + "."
    sents = split_sentences(text)
    assert [s.text for s in sents] == ["b" * 21]
    assert sents[0].idx == 0

def test_runs_of_terminal_marks_are_one_split():
    text = "This is the very first long sentence!!! Is this the second long sentence?? Yes it is the third one..."
    sents = split_sentences(text)
    assert [s.text for s in sents] == [
        "This is the very first long sentence",
        "Is this the second long sentence",
        "Yes it is the third one",
    ]
    assert [s.idx for s in sents] == [0, 1, 2]

def test_indices_follow_filtered_order():
    text = "Tiny. A sentence that is long enough to keep. Ok! Another sentence that is long enough."
    sents = split_sentences(text)
    assert [(s.idx, s.text) for s in sents] == [
        (0, "A sentence that is long enough to keep"),
        (1, "Another sentence that is long enough"),
    ]

def test_empty_and_whitespace_text():
    assert split_sentences("") == []
    assert split_sentences("   \n\n  ") == []

def test_normalize_deletes_punctuation_without_spacing():
    assert normalize("Fine-Day, isn't it?") == "fineday isnt it"

def test_tokenize_filters_short_tokens():
    assert tokenize("Hello, World! It's a fine-day") == ["hello", "world", "fineday"]

def test_tokenize_keeps_digits_and_underscores():
    assert tokenize("Version 2024 of snake_case tools") == ["version", "2024", "snake_case", "tools"]

def test_tokenize_drops_non_ascii_letters():
    # "caf", "rsum" and "nave" remain; only the last two are long enough
    assert normalize("Café résumé naïve") == "caf rsum nave"
    assert tokenize("Café résumé naïve") == ["rsum", "nave"]

def test_tokenize_splits_on_non_ascii_whitespace():
    assert tokenize("garden\u00a0party") == ["garden", "party"]

def test_tokenize_only_short_words():
    assert tokenize("the cat sat on a mat") == []

def test_custom_config():
    cfg = PreprocessConfig(min_sentence_length=5, min_token_length=3)
    assert [s.text for s in split_sentences("Big cat. Tiny", cfg)] == ["Big cat"]
    assert tokenize("the cat sat", cfg) == ["the", "cat", "sat"]

@pytest.mark.parametrize("kwargs", [{"min_sentence_length": -1}, {"min_token_length": 0}])
def test_invalid_config(kwargs):
    with pytest.raises(ValueError):
        PreprocessConfig(**kwargs)
