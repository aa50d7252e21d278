"""Console presenter for CLI output."""

from toolbox_lexicon.models import Entry, SearchResult


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def __init__(self, max_results: int = 0):
        """Initialize the presenter.

        Args:
            max_results: Maximum entries to print per search (0 = all)
        """
        self.max_results = max_results

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_results(self, result: SearchResult) -> None:
        """Display the entries matched by a search."""
        if result.is_empty:
            print("No entries found.")
            return

        print(f"{result.count} results found.")

        shown = result.entries
        if self.max_results and len(shown) > self.max_results:
            shown = shown[: self.max_results]

        for entry in shown:
            print()
            print(self.format_entry(entry))

        if len(shown) < result.count:
            print(f"\n... and {result.count - len(shown)} more entries")

    @staticmethod
    def format_entry(entry: Entry) -> str:
        """Render one entry as labelled lines."""
        lines = [f"Lexeme: {entry.lexeme}"]
        lines.extend(f"Variant: {variant}" for variant in entry.variants)

        if entry.primary_dialect_label:
            lines.append(f"Primary Dialect Label: {entry.primary_dialect_label}")
        if entry.primary_dialect_variant:
            lines.append(f"Primary Dialect Variant: {entry.primary_dialect_variant}")

        for sense in entry.senses:
            lines.append(f"  Sense Number: {sense.sense_number or ''}")
            lines.append(f"  Part of Speech: {sense.part_of_speech or ''}")
            lines.append(f"  Gloss: {sense.gloss or ''}")
            lines.append(f"  Source: {sense.source or ''}")
            lines.append(f"  Semantic Domain: {sense.semantic_domain or ''}")
            lines.append(f"  Definition: {sense.definition or ''}")

        return "\n".join(lines)
