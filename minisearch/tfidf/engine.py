"""
Search engine: ties the store, index, scorer and snippets together.

Query pipeline:
1. Tokenize the query (same rules as indexing, duplicates kept)
2. Union the candidate sets of all query terms (OR semantics)
3. Sum per-term TF-IDF for each candidate
4. Build results with snippets
5. Sort by score (descending), then document id (ascending)
6. Truncate to max_results
"""

import logging
import time
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional, Set

from .index import InvertedIndex
from .scorer import TfidfScorer
from .snippet import DEFAULT_LEAD, DEFAULT_WINDOW, make_snippet
from .store import Document, DocumentStore
from .tokenizer import tokenize

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 10


@dataclass(frozen=True)
class SearchResult:
    """Single ranked hit for a query"""
    document_id: int
    score: float       # Sum of per-term TF-IDF
    title: str
    snippet: str       # Content preview around the first matching query term
    url: str = ""


@dataclass(frozen=True)
class EngineStats:
    """Corpus size figures for reporting"""
    document_count: int
    term_count: int


class SearchEngine:
    """
    In-memory TF-IDF search over an append-only corpus.

    Example::

        engine = SearchEngine()
        engine.add_document("Dog Training", "Training a dog takes patience.")
        results = engine.search("dog", max_results=5)
    """

    def __init__(
        self,
        max_results: int = DEFAULT_MAX_RESULTS,
        snippet_window: int = DEFAULT_WINDOW,
        snippet_lead: int = DEFAULT_LEAD,
    ):
        """
        Args:
            max_results: Default result limit when search() gets none
            snippet_window: Maximum snippet length
            snippet_lead: Characters shown before the matched term
        """
        self.max_results = max_results
        self.snippet_window = snippet_window
        self.snippet_lead = snippet_lead

        self.store = DocumentStore()
        self.index = InvertedIndex()
        self.scorer = TfidfScorer(self.index)

    def add_document(self, title: str, content: str, url: str = "") -> int:
        """
        Store and index a document.

        Returns:
            The new document id
        """
        doc_id = self.store.insert(title, content, url)
        self.index.index(doc_id, tokenize(title), tokenize(content))
        return doc_id

    def get_document(self, doc_id: int) -> Document:
        """Raises DocumentNotFoundError for ids never issued"""
        return self.store.get(doc_id)

    def search(self, query: str, max_results: Optional[int] = None) -> List[SearchResult]:
        """
        Rank documents against a free-text query.

        Args:
            query: Raw query text
            max_results: Result limit (None = engine default, <= 0 = no results;
                a negative limit means zero results, not "unlimited")

        Returns:
            Results sorted by score descending, ties by document id.
            Empty for empty queries, empty corpora and queries without matches.
        """
        if max_results is None:
            max_results = self.max_results

        started = time.perf_counter()
        query_terms = tokenize(query)

        pool: Set[int] = set()
        for term in query_terms:
            pool |= self.index.candidates(term)

        # Repeated query terms contribute once per occurrence
        scores: Dict[int, float] = defaultdict(float)
        for doc_id in pool:
            for term in query_terms:
                scores[doc_id] += self.scorer.score(term, doc_id)

        results = []
        for doc_id, score in scores.items():
            doc = self.store.get(doc_id)
            snippet = make_snippet(doc.content, query_terms, self.snippet_window, self.snippet_lead)
            results.append(SearchResult(doc_id, score, doc.title, snippet, doc.url))

        results.sort(key=lambda r: (-r.score, r.document_id))
        results = results[:max(max_results, 0)]

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.debug(
            f"Search {query!r}: {len(query_terms)} terms, {len(pool)} candidates, "
            f"{len(results)} returned in {elapsed_ms:.2f}ms"
        )

        return results

    def document_count(self) -> int:
        return len(self.store)

    def indexed_term_count(self) -> int:
        return self.index.term_count()

    def stats(self) -> EngineStats:
        return EngineStats(document_count=self.document_count(), term_count=self.indexed_term_count())
