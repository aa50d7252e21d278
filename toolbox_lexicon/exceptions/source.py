"""Text retrieval exceptions."""

from .base import ToolboxLexiconException


class TextSourceError(ToolboxLexiconException):
    """Raised when the dictionary text cannot be retrieved."""

    pass
