"""Protocol for dictionary text sources."""

from typing import Protocol


class TextSource(Protocol):
    """Interface for anything that can supply the raw dictionary text.

    Local files, HTTP resources and in-memory strings all implement this
    protocol so the lexicon service does not care where the text lives.
    """

    @property
    def name(self) -> str:
        """Human-readable description of the source (e.g. a path or URL)."""
        ...

    def fetch(self) -> str:
        """Retrieve the complete dictionary text.

        Returns:
            The full text payload.

        Raises:
            TextSourceError: If the text cannot be retrieved.
        """
        ...
