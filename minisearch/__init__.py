"""
MiniSearch - in-process document indexing and ranked retrieval.

- tfidf: tokenizer, inverted index, TF-IDF scorer, snippets, search engine
- loader: pipe-delimited corpus files
- cli: interactive console and one-shot queries
"""

from .tfidf import SearchEngine, SearchResult

__version__ = "0.1.0"

__all__ = ["SearchEngine", "SearchResult", "__version__"]
