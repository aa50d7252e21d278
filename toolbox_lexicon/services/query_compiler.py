"""Compile wildcard search queries into case-insensitive matchers."""

import re
from collections.abc import Callable

from toolbox_lexicon.exceptions import InvalidQueryError

Matcher = Callable[[str], bool]


def wildcard_to_pattern(query: str) -> str:
    """Translate ``*`` wildcards into ``.*``.

    Every other character is passed through unchanged, so regular
    expression syntax in the query keeps its meaning.
    """
    return query.replace("*", ".*")


def compile_query(query: str) -> Matcher | None:
    """Compile a query into a matcher.

    Args:
        query: User query where ``*`` matches any run of characters

    Returns:
        A function testing whether a string contains a match, or None for
        an empty query (which matches nothing)

    Raises:
        InvalidQueryError: If the translated pattern is not a valid regex
    """
    if not query:
        return None

    try:
        pattern = re.compile(wildcard_to_pattern(query), re.IGNORECASE)
    except re.error as e:
        raise InvalidQueryError(query, str(e)) from e

    def matcher(text: str) -> bool:
        return pattern.search(text) is not None

    return matcher
