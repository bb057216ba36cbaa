"""Tests for the built text collection and query collection."""

import math

import pytest

from conftest import FRUIT_PARAGRAPHS, RIVER_PARAGRAPHS
from vsm_search import DocumentReport, EmptyCollectionError, QueryCollection, TextCollection


def test_fruit_dictionary_and_postings(fruit_collection):
    assert dict(fruit_collection.dictionary) == {"apple": 0, "banana": 1, "cherry": 2}
    assert [dict(p) for p in fruit_collection.posting_lists] == [{0: 2}, {0: 1, 1: 1}, {1: 2}]


def test_fruit_idf_weights_and_norms(fruit_collection):
    assert fruit_collection.idf("apple") == pytest.approx(1.0)
    assert fruit_collection.idf("banana") == pytest.approx(0.0)
    assert fruit_collection.idf("cherry") == pytest.approx(1.0)
    assert fruit_collection.idf("durian") == 0.0

    assert dict(fruit_collection.weights[0]) == pytest.approx({"apple": 1.0, "banana": 0.0})
    assert dict(fruit_collection.weights[1]) == pytest.approx({"banana": 0.0, "cherry": 1.0})
    assert fruit_collection.norms == pytest.approx((1.0, 1.0))


def test_fruit_query_scores_and_rank(fruit_collection):
    query = frozenset({"apple"})
    assert fruit_collection.similarity(query) == pytest.approx({0: 1.0})
    assert fruit_collection.rank(query, top_k=1) == [(0, pytest.approx(1.0))]


def test_two_term_query_uses_query_norm(fruit_collection):
    scores = fruit_collection.similarity(frozenset({"apple", "cherry"}))
    assert scores == pytest.approx({0: 1 / math.sqrt(2), 1: 1 / math.sqrt(2)})
    assert [did for did, _ in fruit_collection.rank(frozenset({"apple", "cherry"}))] == [0, 1]


def test_unknown_query_terms_score_nothing(fruit_collection):
    assert fruit_collection.similarity(frozenset({"durian", "elderberry"})) == {}
    assert fruit_collection.rank(frozenset({"durian"}), top_k=3) == []


def test_unknown_terms_still_count_in_query_norm(fruit_collection):
    scores = fruit_collection.similarity(frozenset({"apple", "durian"}))
    assert scores == pytest.approx({0: 1 / math.sqrt(2)})


def test_rank_clamps_to_available_results(fruit_collection):
    assert len(fruit_collection.rank(frozenset({"apple", "cherry"}), top_k=10)) == 2


def test_document_report(fruit_collection):
    report = fruit_collection.document_report(0, top_n=5)

    assert isinstance(report, DocumentReport)
    assert report.doc_id == 0
    assert report.unique_terms == 2
    assert report.norm == pytest.approx(1.0)
    assert report.keywords == [
        ("apple", pytest.approx(1.0), {0: (0, 1)}),
        ("banana", pytest.approx(0.0), {0: (2,), 1: (0,)}),
    ]


def test_document_report_rejects_unknown_document(fruit_collection):
    with pytest.raises(IndexError):
        fruit_collection.document_report(2)
    with pytest.raises(IndexError):
        fruit_collection.document_report(-1)


def test_empty_corpus_is_rejected(cfg):
    with pytest.raises(EmptyCollectionError):
        TextCollection([], cfg)


def test_empty_document_keeps_its_slot(river_collection):
    empty = river_collection.documents[2]
    assert empty.doc_id == 2
    assert empty.is_empty()
    assert dict(river_collection.weights[2]) == {}
    assert river_collection.norms[2] == 0.0

    report = river_collection.document_report(2)
    assert report.keywords == []
    assert report.unique_terms == 0


def test_collection_of_only_empty_documents(cfg, tokenizer):
    tc = TextCollection([tokenizer.tokenize("It is a cat."), tokenizer.tokenize("")], cfg)
    assert tc.num_documents == 2
    assert len(tc.dictionary) == 0
    assert tc.similarity(frozenset({"cat"})) == {}


def test_build_is_deterministic(cfg, tokenizer):
    def build():
        return TextCollection([tokenizer.tokenize(p) for p in RIVER_PARAGRAPHS], cfg)

    a, b = build(), build()
    assert list(a.dictionary.items()) == list(b.dictionary.items())
    assert [dict(p) for p in a.posting_lists] == [dict(p) for p in b.posting_lists]
    assert [dict(w) for w in a.weights] == [dict(w) for w in b.weights]
    assert a.norms == b.norms


def test_weight_vectors_match_document_terms(river_collection):
    for doc, vec in zip(river_collection.documents, river_collection.weights):
        assert set(vec) == set(doc.terms)


def test_posting_lists_match_documents(river_collection):
    dictionary = river_collection.dictionary
    for term, term_id in dictionary.items():
        plist = river_collection.posting_lists[term_id]
        for doc in river_collection.documents:
            if term in doc.terms:
                assert plist[doc.doc_id] == len(doc.terms[term])
            else:
                assert doc.doc_id not in plist


def test_norms_are_non_negative_and_zero_only_for_zero_weights(river_collection):
    for norm, vec in zip(river_collection.norms, river_collection.weights):
        assert norm >= 0.0
        assert (norm == 0.0) == all(w == 0.0 for w in vec.values())


def test_rank_is_stable(river_collection, tokenizer):
    query = tokenizer.parse_query("quick river salmon")
    assert river_collection.rank(query, top_k=5) == river_collection.rank(query, top_k=5)


def test_river_ranking(river_collection, tokenizer):
    ranked = river_collection.rank(tokenizer.parse_query("salmon"), top_k=5)
    assert sorted(did for did, _ in ranked) == [1, 4]
    assert ranked[0][1] > 0


def test_accessors_are_read_only(fruit_collection):
    with pytest.raises(TypeError):
        fruit_collection.dictionary["durian"] = 3
    with pytest.raises(TypeError):
        fruit_collection.posting_lists[0][1] = 4
    with pytest.raises(TypeError):
        fruit_collection.weights[0]["apple"] = 2.0
    assert isinstance(fruit_collection.documents, tuple)
    assert isinstance(fruit_collection.norms, tuple)


def test_get_stats(river_collection):
    stats = river_collection.get_stats()
    assert stats["num_documents"] == 5
    assert stats["empty_documents"] == 1
    assert stats["num_terms"] == len(river_collection.dictionary)


def test_query_collection_from_lines(tokenizer):
    qc = QueryCollection.from_lines(["apples and bananas", "", "what would cherries do"], tokenizer)

    assert len(qc) == 3
    assert qc[0] == frozenset({"apple", "banana"})
    assert qc[1] == frozenset()
    assert qc[2] == frozenset({"what", "would", "cherrie"})
    assert list(qc) == qc.queries
