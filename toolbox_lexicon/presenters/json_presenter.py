"""JSON presenter for machine-readable output."""

import json
import sys

from toolbox_lexicon.models import Entry, SearchResult


class JsonPresenter:
    """Write results as JSON to stdout; messages go to stderr."""

    def __init__(self, indent: int | None = 2):
        self.indent = indent

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message, file=sys.stderr)

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}", file=sys.stderr)

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}", file=sys.stderr)

    def show_results(self, result: SearchResult) -> None:
        """Write the search result as a JSON object."""
        payload = {
            "query": result.query,
            "count": result.count,
            "entries": [entry.to_dict() for entry in result.entries],
        }
        if result.error:
            payload["error"] = result.error
        print(json.dumps(payload, ensure_ascii=False, indent=self.indent))

    def show_entries(self, entries: list[Entry]) -> None:
        """Write a plain list of entries as a JSON array."""
        print(
            json.dumps(
                [entry.to_dict() for entry in entries],
                ensure_ascii=False,
                indent=self.indent,
            )
        )
