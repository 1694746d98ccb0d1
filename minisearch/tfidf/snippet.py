"""
Snippet extraction for search result previews.

The window is anchored on the first query term (in query order) that occurs
anywhere in the normalized content:

    start  = max(0, match_position - lead)
    length = min(window, len(content) - start)

"..." marks a window that does not start at 0 or does not reach the end.
When no query term occurs, the window starts at 0, so a snippet is always
produced.
"""

from typing import Sequence

from .tokenizer import normalize

DEFAULT_WINDOW = 150
DEFAULT_LEAD = 75
ELLIPSIS = "..."


def find_match_position(content: str, query_terms: Sequence[str]) -> int:
    """
    Offset of the first query term found in the normalized content, or 0.

    Offsets are valid in the raw content because normalize() preserves length.
    """
    normalized = normalize(content)
    for term in query_terms:
        pos = normalized.find(term)
        if pos != -1:
            return pos
    return 0


def make_snippet(
    content: str,
    query_terms: Sequence[str],
    window: int = DEFAULT_WINDOW,
    lead: int = DEFAULT_LEAD,
) -> str:
    """
    Cut a preview of content around the first query term match.

    Args:
        content: Raw document content
        query_terms: Tokenized query, in query order
        window: Maximum snippet length (before ellipses)
        lead: Characters kept before the match

    Returns:
        Raw-text excerpt, with "..." on truncated sides

    Examples:
        >>> make_snippet("Cats are great pets.", ["pets"])
        'Cats are great pets.'
    """
    pos = find_match_position(content, query_terms)

    start = max(0, pos - lead)
    length = min(window, len(content) - start)

    snippet = content[start:start + length]
    if start > 0:
        snippet = ELLIPSIS + snippet
    if start + length < len(content):
        snippet += ELLIPSIS

    return snippet
