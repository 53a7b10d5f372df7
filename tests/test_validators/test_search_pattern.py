"""Tests for search pattern compilation."""
import re
import pytest

from finance_tracker.validators import compile_search_pattern, INVALID_PATTERN


class TestCompileSearchPattern:
    """Test safe regex compilation."""

    def test_plain_text_is_case_insensitive(self):
        """Test compiled pattern ignores case."""
        pattern = compile_search_pattern("lunch")

        assert isinstance(pattern, re.Pattern)
        assert pattern.search("Big LUNCH today")

    def test_regex_syntax_supported(self):
        """Test alternation and anchors."""
        pattern = compile_search_pattern("^(food|books)$")

        assert pattern.search("Books")
        assert not pattern.search("Bookshelf")

    @pytest.mark.parametrize("text", ["(", "[a-", "*coffee", "a{2,1}", "(?P<x"])
    def test_malformed_returns_invalid(self, text):
        """Test malformed input never raises."""
        assert compile_search_pattern(text) is INVALID_PATTERN

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_blank_returns_none(self, text):
        """Test empty search means no filter."""
        assert compile_search_pattern(text) is None
