"""Tests for query_compiler module."""

import pytest

from toolbox_lexicon.exceptions import InvalidQueryError
from toolbox_lexicon.services.query_compiler import compile_query, wildcard_to_pattern


class TestWildcardToPattern:
    """Tests for wildcard_to_pattern."""

    def test_star_becomes_dot_star(self):
        assert wildcard_to_pattern("a*b") == "a.*b"

    def test_every_star_translated(self):
        assert wildcard_to_pattern("*a**") == ".*a.*.*"

    def test_other_regex_syntax_passes_through(self):
        assert wildcard_to_pattern("^ca[tr]$") == "^ca[tr]$"


class TestCompileQuery:
    """Tests for compile_query."""

    def test_empty_query_returns_none(self):
        assert compile_query("") is None

    def test_wildcard_semantics(self):
        matcher = compile_query("a*b")
        assert matcher("aXYZb") is True
        assert matcher("ab") is True
        assert matcher("ba") is False

    def test_case_insensitive(self):
        matcher = compile_query("DOG")
        assert matcher("dog") is True
        assert matcher("Hotdog stand") is True

    def test_substring_match(self):
        assert compile_query("eli")("feline") is True

    def test_star_alone_matches_anything(self):
        matcher = compile_query("*")
        assert matcher("anything") is True
        assert matcher("") is True

    def test_regex_characters_keep_their_meaning(self):
        matcher = compile_query("^ca[tr]$")
        assert matcher("cat") is True
        assert matcher("car") is True
        assert matcher("scat") is False

    def test_invalid_pattern_raises(self):
        with pytest.raises(InvalidQueryError) as exc_info:
            compile_query("(unclosed")

        assert exc_info.value.query == "(unclosed"
        assert "Invalid search pattern" in str(exc_info.value)

    def test_leading_star_is_valid(self):
        """A leading '*' becomes '.*', so it never hits 'nothing to repeat'."""
        assert compile_query("*at")("cat") is True
