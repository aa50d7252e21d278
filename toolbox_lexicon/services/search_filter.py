"""Filter entries by lexeme, gloss and definition."""

import logging

from toolbox_lexicon.exceptions import InvalidQueryError
from toolbox_lexicon.models import Entry, Sense

from .query_compiler import Matcher, compile_query

logger = logging.getLogger(__name__)


def _sense_matches(matcher: Matcher, sense: Sense) -> bool:
    if not sense.has_searchable_text:
        return False
    return bool(sense.gloss and matcher(sense.gloss)) or bool(
        sense.definition and matcher(sense.definition)
    )


def entry_matches(matcher: Matcher, entry: Entry) -> bool:
    """Check an entry's lexeme and each sense's gloss/definition against a matcher.

    Entries without a lexeme are logged and never match.
    """
    if not entry.is_valid:
        logger.error(f"No lexeme found: {entry!r}")
        return False

    if matcher(entry.lexeme):
        return True
    return any(_sense_matches(matcher, sense) for sense in entry.senses)


def filter_entries(matcher: Matcher | None, entries: list[Entry]) -> list[Entry]:
    """Return the entries accepted by the matcher, in their original order.

    Args:
        matcher: Compiled matcher, or None for the empty query
        entries: Parsed entries to search

    Returns:
        Matching entries (empty when matcher is None)
    """
    if matcher is None:
        return []
    return [entry for entry in entries if entry_matches(matcher, entry)]


def search_entries(query: str, entries: list[Entry]) -> list[Entry]:
    """Search entries with a wildcard query.

    Invalid patterns are logged and produce no results instead of raising.

    Args:
        query: User query (``*`` is a wildcard, matching is case-insensitive)
        entries: Parsed entries to search

    Returns:
        Matching entries in source order
    """
    try:
        matcher = compile_query(query)
    except InvalidQueryError as e:
        logger.error(str(e))
        return []

    return filter_entries(matcher, entries)
