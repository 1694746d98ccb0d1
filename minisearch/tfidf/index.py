"""
Inverted index with term and document frequency bookkeeping.

Three structures are kept in sync on every insertion:
- inverted index: term -> set of document ids containing it
- term frequency: per document (dense list by id), term -> occurrence count
- document frequency: term -> number of documents containing it

Title terms are indexed twice to boost title matches:
    stream = title_terms + title_terms + content_terms

Invariant after every index() call:
    document_frequency(t) == len(candidates(t)) for every indexed term t
"""

import logging
from collections import Counter, defaultdict
from typing import Dict, FrozenSet, Iterator, List, Sequence, Set

logger = logging.getLogger(__name__)


class InvertedIndex:
    """In-memory inverted index over dense document ids"""

    def __init__(self):
        self._postings: Dict[str, Set[int]] = defaultdict(set)
        self._term_frequencies: List[Dict[str, int]] = []
        self._document_frequencies: Dict[str, int] = defaultdict(int)

    def index(self, doc_id: int, title_terms: Sequence[str], content_terms: Sequence[str]) -> None:
        """
        Add one document's terms to the index.

        Args:
            doc_id: Id issued by the document store; must be the next id
            title_terms: Tokenized title (counted twice)
            content_terms: Tokenized content

        Raises:
            ValueError: If doc_id is not the next sequential id
        """
        if doc_id != len(self._term_frequencies):
            raise ValueError(
                f"Documents must be indexed in order: expected id {len(self._term_frequencies)}, got {doc_id}"
            )

        stream = list(title_terms) + list(title_terms) + list(content_terms)
        counts = Counter()

        for term in stream:
            self._postings[term].add(doc_id)
            counts[term] += 1

        self._term_frequencies.append(dict(counts))

        # Once per distinct term: df counts documents, not occurrences
        for term in counts:
            self._document_frequencies[term] += 1

        logger.debug(f"Indexed document {doc_id}: {len(stream)} tokens, {len(counts)} distinct terms")

    def candidates(self, term: str) -> FrozenSet[int]:
        """Ids of documents containing term (empty if unindexed)"""
        postings = self._postings.get(term)
        return frozenset(postings) if postings else frozenset()

    def frequency(self, doc_id: int, term: str) -> int:
        """Raw count of term in the document's weighted stream (0 if absent)"""
        if not 0 <= doc_id < len(self._term_frequencies):
            return 0
        return self._term_frequencies[doc_id].get(term, 0)

    def document_frequency(self, term: str) -> int:
        """Number of documents containing term (0 if unindexed)"""
        return self._document_frequencies.get(term, 0)

    def document_count(self) -> int:
        return len(self._term_frequencies)

    def terms(self) -> Iterator[str]:
        """Indexed terms, in no particular order"""
        return iter(self._postings)

    def term_count(self) -> int:
        """Number of distinct indexed terms"""
        return len(self._postings)
