"""
TF-IDF scorer over an InvertedIndex.

Formula:
    score(term, doc) = tf × ln(N / df)

Where:
    tf = raw count of term in the document's weighted stream (no length normalization)
    N  = number of indexed documents
    df = number of documents containing term

A term found in every document has idf = ln(1) = 0 and adds nothing to the
score, however often it occurs.
"""

import math

from .index import InvertedIndex


class TfidfScorer:
    """Per-(term, document) TF-IDF relevance"""

    def __init__(self, index: InvertedIndex):
        self.index = index

    def score(self, term: str, doc_id: int) -> float:
        """
        Compute TF-IDF for one query term against one document.

        Args:
            term: Normalized query term
            doc_id: Document id

        Returns:
            tf × idf, or 0.0 when the term does not occur in the document

        Example:
            >>> scorer.score("dog", 1)  # tf=3, N=3, df=1
            3.295...
        """
        tf = self.index.frequency(doc_id, term)
        if tf == 0:
            return 0.0

        df = self.index.document_frequency(term)
        if df == 0:
            return 0.0

        idf = math.log(self.index.document_count() / df)
        return tf * idf
