"""CLI command for searching a dictionary as queries are typed."""

import sys

from toolbox_lexicon.cli.commands import build_lexicon_service
from toolbox_lexicon.config import create_default_config
from toolbox_lexicon.models import SearchResult
from toolbox_lexicon.presenters import ConsolePresenter

QUIT_COMMANDS = {":q", ":quit"}


def interactive_command(args, input_stream=None) -> int:
    """Execute the interactive subcommand.

    The dictionary is parsed once; every input line re-runs the search
    over the same entries. An empty line clears the results.

    Args:
        args: Parsed command-line arguments
        input_stream: Where queries are read from (defaults to stdin)

    Returns:
        Exit code (always 0)
    """
    config = create_default_config(source_location=args.source, max_display_results=args.limit)
    presenter = ConsolePresenter(max_results=config.max_display_results)
    stream = input_stream if input_stream is not None else sys.stdin

    service = build_lexicon_service(config.source_location, config)
    entries = service.load()
    presenter.show_info(f"Loaded {len(entries)} entries from {config.source_location}")
    presenter.show_info("Type a query ('*' is a wildcard), an empty line to clear, :q to quit.")

    for line in stream:
        query = line.rstrip("\r\n")
        if query.strip() in QUIT_COMMANDS:
            break

        if not query:
            presenter.show_results(SearchResult(query=""))
            continue

        result = service.search(query)
        if result.error:
            presenter.show_error(result.error)
        presenter.show_results(result)

    return 0
