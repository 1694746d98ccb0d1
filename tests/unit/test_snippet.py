"""
Unit tests for snippet extraction.
"""

from minisearch.tfidf.snippet import find_match_position, make_snippet


def long_text(match_at, total=400, term="needle"):
    """Filler text with term starting at offset match_at"""
    filler = "x" * total
    return filler[:match_at] + term + filler[match_at + len(term):]


class TestFindMatchPosition:
    """Test match anchoring"""

    def test_first_term_in_query_order_wins(self):
        content = "alpha beta gamma"
        # gamma is listed first, so it anchors even though beta occurs earlier
        assert find_match_position(content, ["gamma", "beta"]) == 11

    def test_falls_through_to_later_terms(self):
        assert find_match_position("alpha beta gamma", ["zeta", "beta"]) == 6

    def test_no_match_defaults_to_zero(self):
        assert find_match_position("alpha beta gamma", ["zeta"]) == 0
        assert find_match_position("alpha beta gamma", []) == 0

    def test_case_and_punctuation_insensitive(self):
        assert find_match_position("Hello, WORLD!", ["world"]) == 7

    def test_substring_match(self):
        """Matching is by substring of normalized text, not whole words"""
        assert find_match_position("Cats and Dogs", ["dog"]) == 9


class TestMakeSnippet:
    """Test window and ellipsis rules"""

    def test_short_content_returned_whole(self):
        content = "Training a dog takes patience."
        assert make_snippet(content, ["dog"]) == content

    def test_short_content_without_match(self):
        content = "Stars and planets are far away."
        assert make_snippet(content, ["dog"]) == content

    def test_empty_content(self):
        assert make_snippet("", ["dog"]) == ""

    def test_leading_excerpt_when_no_match(self):
        content = long_text(200)
        snippet = make_snippet(content, ["missing"])
        assert snippet == content[:150] + "..."

    def test_match_near_start_not_prefixed(self):
        content = long_text(50)
        snippet = make_snippet(content, ["needle"])
        assert not snippet.startswith("...")
        assert snippet == content[:150] + "..."

    def test_match_in_middle(self):
        content = long_text(200)
        snippet = make_snippet(content, ["needle"])
        # Window starts 75 characters before the match
        assert snippet == "..." + content[125:275] + "..."
        assert "needle" in snippet

    def test_match_near_end(self):
        content = long_text(380, total=400)
        snippet = make_snippet(content, ["needle"])
        assert snippet == "..." + content[305:]
        assert not snippet.endswith("...")

    def test_window_exactly_reaches_end(self):
        content = "y" * 150
        assert make_snippet(content, []) == content

    def test_raw_text_is_sliced(self):
        """Snippet keeps original case and punctuation"""
        content = "Intro. " + "-" * 100 + " The DOG, barking! " + "=" * 100
        snippet = make_snippet(content, ["dog"])
        assert "DOG, barking!" in snippet

    def test_custom_window(self):
        content = long_text(100)
        snippet = make_snippet(content, ["needle"], window=20, lead=5)
        assert snippet == "..." + content[95:115] + "..."
