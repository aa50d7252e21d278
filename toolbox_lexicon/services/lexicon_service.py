"""Service that loads a dictionary once and answers repeated searches."""

import logging

from toolbox_lexicon.config import LexiconConfig
from toolbox_lexicon.exceptions import InvalidQueryError, TextSourceError
from toolbox_lexicon.interfaces import TextSource
from toolbox_lexicon.models import Entry, SearchResult

from .entry_builder import parse_text
from .query_compiler import compile_query
from .search_filter import filter_entries

logger = logging.getLogger(__name__)


class LexiconService:
    """Load dictionary text from a source and search the parsed entries.

    The text is parsed once in ``load()``; each call to ``search()`` only
    re-runs the filter over the cached entries.
    """

    def __init__(self, source: TextSource, config: LexiconConfig | None = None):
        """Initialize the lexicon service.

        Args:
            source: Where the dictionary text comes from
            config: Optional configuration
        """
        self.source = source
        self.config = config or LexiconConfig()
        self._entries: list[Entry] | None = None

    @property
    def entries(self) -> list[Entry]:
        """Parsed entries (empty until loaded)."""
        return list(self._entries) if self._entries is not None else []

    def is_loaded(self) -> bool:
        """Check if load() has been called."""
        return self._entries is not None

    def load(self) -> list[Entry]:
        """Fetch and parse the dictionary text.

        Retrieval failures are logged and leave the service with no entries.

        Returns:
            The parsed entries
        """
        try:
            text = self.source.fetch()
        except TextSourceError as e:
            logger.error(f"Error fetching data: {e}")
            self._entries = []
            return []
        except Exception as e:
            logger.error(f"Error fetching data from {self.source.name}: {e}", exc_info=True)
            self._entries = []
            return []

        self._entries = parse_text(text)
        logger.info(f"Loaded {len(self._entries)} entries from {self.source.name}")
        return self.entries

    def search(self, query: str) -> SearchResult:
        """Search the loaded entries.

        Args:
            query: Wildcard query (``*`` matches any run of characters)

        Returns:
            SearchResult; empty for an empty or invalid query
        """
        if self._entries is None:
            self.load()

        try:
            matcher = compile_query(query)
        except InvalidQueryError as e:
            logger.error(str(e))
            return SearchResult(query=query, error=str(e))

        matches = filter_entries(matcher, self._entries or [])
        logger.debug(f"{len(matches)} results found for {query!r}")
        return SearchResult(query=query, entries=matches)
