"""
Text normalization and tokenization for the TF-IDF index.

Tokenization pipeline:
1. Lowercase alphanumeric characters
2. Replace punctuation and symbols with a single space (whitespace is kept)
3. Split on whitespace
4. Drop tokens shorter than MIN_TERM_LENGTH

Normalization never adds or removes characters, so an offset found in the
normalized text is also valid in the raw text. Snippet extraction relies on this.
"""

from typing import List

# Tokens of 1-2 characters ("a", "is", "of") are dropped
MIN_TERM_LENGTH = 3


def normalize(text: str) -> str:
    """
    Lowercase alphanumerics and blank out everything else except whitespace.

    Args:
        text: Raw text

    Returns:
        Normalized text, same length as the input

    Examples:
        >>> normalize("C++ is FUN!")
        'c   is fun '
    """
    return "".join(_normalize_char(ch) for ch in text)


def _normalize_char(ch: str) -> str:
    if ch.isspace():
        return ch
    if not ch.isalnum():
        return " "
    lowered = ch.lower()
    # A few characters lowercase to two code points ("İ" -> "i̇"); keep those as-is
    return lowered if len(lowered) == 1 else ch


def tokenize(text: str) -> List[str]:
    """
    Split text into index terms.

    Args:
        text: Raw text (title, content or query)

    Returns:
        Terms in order of appearance, duplicates kept

    Examples:
        >>> tokenize("Cats and Dogs")
        ['cats', 'and', 'dogs']

        >>> tokenize("C++ is a language")
        ['language']

        >>> tokenize("   ")
        []
    """
    if not text:
        return []

    return [t for t in normalize(text).split() if len(t) >= MIN_TERM_LENGTH]
