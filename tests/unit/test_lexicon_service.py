"""Tests for LexiconService."""

import logging
from unittest.mock import MagicMock

from toolbox_lexicon.exceptions import TextSourceError
from toolbox_lexicon.models import SearchResult
from toolbox_lexicon.services.lexicon_service import LexiconService
from toolbox_lexicon.services.sources import StringTextSource


class TestLoad:
    """Tests for load method."""

    def test_load_parses_text(self, cat_dog_text, test_config):
        service = LexiconService(StringTextSource(cat_dog_text), test_config)

        entries = service.load()

        assert [e.lexeme for e in entries] == ["cat", "dog"]
        assert service.is_loaded() is True

    def test_not_loaded_initially(self, cat_dog_text):
        service = LexiconService(StringTextSource(cat_dog_text))
        assert service.is_loaded() is False
        assert service.entries == []

    def test_retrieval_failure_gives_empty_entries(self, caplog):
        source = MagicMock()
        source.name = "broken"
        source.fetch.side_effect = TextSourceError("unreachable")
        service = LexiconService(source)

        with caplog.at_level(logging.ERROR):
            entries = service.load()

        assert entries == []
        assert service.is_loaded() is True
        assert "Error fetching data" in caplog.text

    def test_unexpected_retrieval_error_gives_empty_entries(self, caplog):
        """Errors a source raises outside TextSourceError are not fatal either."""
        source = MagicMock()
        source.name = "flaky"
        source.fetch.side_effect = ConnectionResetError("peer reset")
        service = LexiconService(source)

        with caplog.at_level(logging.ERROR):
            entries = service.load()

        assert entries == []
        assert service.is_loaded() is True
        assert "peer reset" in caplog.text

    def test_os_error_then_search_returns_empty(self):
        source = MagicMock()
        source.name = "disk"
        source.fetch.side_effect = OSError("device not ready")
        service = LexiconService(source)

        assert service.search("*").is_empty is True

    def test_entries_property_returns_copy(self, cat_dog_text):
        service = LexiconService(StringTextSource(cat_dog_text))
        service.load()

        service.entries.clear()

        assert len(service.entries) == 2


class TestSearch:
    """Tests for search method."""

    def test_search_returns_result(self, cat_dog_text):
        service = LexiconService(StringTextSource(cat_dog_text))
        service.load()

        result = service.search("fel*")

        assert isinstance(result, SearchResult)
        assert result.query == "fel*"
        assert [e.lexeme for e in result.entries] == ["cat"]
        assert result.error is None

    def test_search_loads_lazily(self, cat_dog_text):
        service = LexiconService(StringTextSource(cat_dog_text))
        result = service.search("dog")
        assert result.count == 1

    def test_parses_only_once(self, cat_dog_text):
        source = MagicMock()
        source.name = "counted"
        source.fetch.return_value = cat_dog_text
        service = LexiconService(source)

        service.load()
        service.search("c")
        service.search("ca")
        service.search("cat")

        assert source.fetch.call_count == 1

    def test_empty_query(self, cat_dog_text):
        service = LexiconService(StringTextSource(cat_dog_text))
        result = service.search("")
        assert result.is_empty is True
        assert result.error is None

    def test_invalid_query(self, cat_dog_text, caplog):
        service = LexiconService(StringTextSource(cat_dog_text))
        service.load()

        with caplog.at_level(logging.ERROR):
            result = service.search("[unclosed")

        assert result.is_empty is True
        assert result.error is not None
        assert "Invalid search pattern" in caplog.text

    def test_search_after_failed_load(self):
        source = MagicMock()
        source.name = "broken"
        source.fetch.side_effect = TextSourceError("unreachable")
        service = LexiconService(source)

        result = service.search("*")

        assert result.is_empty is True
