"""Data models for search results."""

from dataclasses import dataclass, field

from .entry import Entry


@dataclass
class SearchResult:
    """Entries matched by one query, in source order."""

    query: str
    entries: list[Entry] = field(default_factory=list)
    error: str | None = None  # Set when the query did not compile

    @property
    def count(self) -> int:
        """Number of matching entries."""
        return len(self.entries)

    @property
    def is_empty(self) -> bool:
        """Check if nothing matched (the "no entries found" case)."""
        return len(self.entries) == 0

    def __str__(self) -> str:
        return f"SearchResult(query={self.query!r}, count={self.count})"
