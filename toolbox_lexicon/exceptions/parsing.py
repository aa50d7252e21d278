"""Dictionary parsing exceptions."""

from .base import ToolboxLexiconException


class LexiconParseError(ToolboxLexiconException):
    """Raised when a dictionary file cannot be read for parsing."""

    pass
