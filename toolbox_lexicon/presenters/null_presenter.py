"""Null presenter for testing (no output)."""

from toolbox_lexicon.models import SearchResult


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_results(self, result: SearchResult) -> None:
        """Display the entries matched by a search (no-op)."""
        pass
