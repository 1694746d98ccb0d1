"""
TF-IDF ranked retrieval over an in-memory corpus.

Components:
- tokenizer: Length-preserving normalization and term extraction
- store: Append-only document store with dense ids
- index: Inverted index with term/document frequency tables
- scorer: Raw TF-IDF (tf × ln(N/df))
- snippet: Windowed excerpts around the first matching query term
- engine: Query pipeline (candidates, scoring, ranking, snippets)

Titles are indexed twice so that title matches outrank body matches.
"""

from .tokenizer import normalize, tokenize
from .store import Document, DocumentNotFoundError, DocumentStore
from .index import InvertedIndex
from .scorer import TfidfScorer
from .snippet import make_snippet
from .engine import EngineStats, SearchEngine, SearchResult

__all__ = [
    "normalize",
    "tokenize",
    "Document",
    "DocumentNotFoundError",
    "DocumentStore",
    "InvertedIndex",
    "TfidfScorer",
    "make_snippet",
    "EngineStats",
    "SearchEngine",
    "SearchResult",
]
