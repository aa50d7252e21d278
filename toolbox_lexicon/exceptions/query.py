"""Search query exceptions."""

from .base import ToolboxLexiconException


class InvalidQueryError(ToolboxLexiconException):
    """Raised when a search query does not compile to a valid pattern."""

    def __init__(self, query: str, reason: str):
        self.query = query
        self.reason = reason
        super().__init__(f"Invalid search pattern {query!r}: {reason}")
