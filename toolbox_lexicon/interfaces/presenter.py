"""Presenter protocol for output abstraction."""

from typing import Protocol

from toolbox_lexicon.models import SearchResult


class PresenterProtocol(Protocol):
    """Interface for presenting output to user (CLI, JSON, etc).

    This protocol abstracts all output operations, allowing the same
    search logic to work with different presentation layers.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message.

        Args:
            message: The warning message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_results(self, result: SearchResult) -> None:
        """Display the entries matched by a search.

        An empty result is the "no entries found" case and must be
        rendered as such rather than as an empty list.

        Args:
            result: The search result to display
        """
        ...
