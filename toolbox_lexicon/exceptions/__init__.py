"""Custom exceptions for Toolbox Lexicon."""

from .base import ToolboxLexiconException
from .parsing import LexiconParseError
from .query import InvalidQueryError
from .source import TextSourceError

__all__ = [
    "ToolboxLexiconException",
    "TextSourceError",
    "LexiconParseError",
    "InvalidQueryError",
]
