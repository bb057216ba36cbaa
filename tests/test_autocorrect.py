"""Tests for query auto-correction."""

import pytest

from vsm_search import AutoCorrect


@pytest.fixture
def auto_correct(cfg):
    return AutoCorrect(cfg)


@pytest.fixture
def vocab():
    dictionary = {"apple": 0, "banana": 1, "cherry": 2, "apply": 3}
    term_freq = {"apple": 5, "banana": 2, "cherry": 1, "apply": 1}
    return dictionary, term_freq


def test_build_len_index(auto_correct, vocab):
    dictionary, _ = vocab
    index = auto_correct.build_len_index(dictionary)
    assert sorted(index[5]) == ["apple", "apply"]
    assert sorted(index[6]) == ["banana", "cherry"]


def test_suggestion_prefers_frequent_term_on_distance_tie(auto_correct, vocab):
    dictionary, term_freq = vocab
    by_len = auto_correct.build_len_index(dictionary)
    assert auto_correct.suggest_correction("appla", dictionary, term_freq, by_len) == ("apple", 1)


def test_suggestion_breaks_frequency_tie_by_term_id(auto_correct, vocab):
    dictionary, _ = vocab
    by_len = auto_correct.build_len_index(dictionary)
    flat = {term: 1 for term in dictionary}
    assert auto_correct.suggest_correction("appla", dictionary, flat, by_len) == ("apple", 1)


def test_no_suggestion_beyond_max_distance(auto_correct, vocab):
    dictionary, term_freq = vocab
    by_len = auto_correct.build_len_index(dictionary)
    assert auto_correct.suggest_correction("zzzzzz", dictionary, term_freq, by_len) == (None, None)
    assert auto_correct.suggest_correction("aplpy", dictionary, term_freq, by_len, max_dist=0) == (None, None)


def test_autocorrect_query_terms(auto_correct, vocab):
    dictionary, term_freq = vocab
    by_len = auto_correct.build_len_index(dictionary)

    corrected, changes, oov = auto_correct.autocorrect_query_terms(
        frozenset({"chery", "apple", "qqqqqqq"}), dictionary, term_freq, by_len
    )

    assert corrected == frozenset({"cherry", "apple", "qqqqqqq"})
    assert changes == [("chery", "cherry")]
    assert oov == ["qqqqqqq"]
