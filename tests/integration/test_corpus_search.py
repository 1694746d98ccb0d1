"""
Integration tests: load a corpus file from tests/fixtures and search it.

No external services; these exercise loader, index, scorer and snippets together.
"""

import math
from pathlib import Path

import pytest

from minisearch.loader import load_documents
from minisearch.sample_data import load_sample_documents
from minisearch.tfidf.engine import SearchEngine

FIXTURES = Path(__file__).parent.parent / "fixtures"


@pytest.fixture
def corpus_engine():
    engine = SearchEngine()
    report = load_documents(engine, FIXTURES / "pets.txt")
    assert report.loaded == 4
    assert report.skipped == 1
    return engine


class TestCorpusSearch:
    def test_ids_follow_file_order(self, corpus_engine):
        titles = [corpus_engine.get_document(i).title for i in range(4)]
        assert titles == ["Cats and Dogs", "Dog Training", "Astronomy", "Dogs in Space"]

    def test_dog_ranking(self, corpus_engine):
        results = corpus_engine.search("dog")
        # dog: tf=3 in "Dog Training", tf=1 in "Dogs in Space"; df=2, N=4
        assert [r.document_id for r in results] == [1, 3]
        assert results[0].score == pytest.approx(3 * math.log(2))
        assert results[1].score == pytest.approx(math.log(2))
        assert results[0].url == "https://example.com/dog-training"

    def test_document_frequency_invariant(self, corpus_engine):
        index = corpus_engine.index
        for term in index.terms():
            assert index.document_frequency(term) == len(index.candidates(term))

    def test_astronomy_never_matches_pets(self, corpus_engine):
        for query in ("dog", "cats", "pets", "training"):
            assert 2 not in {r.document_id for r in corpus_engine.search(query)}

    def test_snippet_points_at_match(self, corpus_engine):
        result = next(r for r in corpus_engine.search("orbit") if r.document_id == 3)
        assert "orbit" in result.snippet


class TestSampleCorpus:
    @pytest.fixture
    def sample_engine(self):
        engine = SearchEngine()
        load_sample_documents(engine)
        return engine

    def test_stats(self, sample_engine):
        assert sample_engine.document_count() == 5
        assert sample_engine.indexed_term_count() > 50

    def test_title_match_outranks_body_match(self, sample_engine):
        # "algorithms" is in the title of doc 1 and only the body of doc 3
        results = sample_engine.search("algorithms")
        assert [r.document_id for r in results][:2] == [1, 3]

    def test_multi_term_query(self, sample_engine):
        results = sample_engine.search("machine learning python", max_results=3)
        assert results[0].title == "Machine Learning with Python"
        assert len(results) <= 3
