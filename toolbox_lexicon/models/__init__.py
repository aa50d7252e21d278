"""Data models for Toolbox Lexicon."""

from .entry import Entry, Sense
from .search import SearchResult

__all__ = ["Entry", "Sense", "SearchResult"]
