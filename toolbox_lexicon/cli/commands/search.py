"""CLI command for a one-shot dictionary search."""

from toolbox_lexicon.cli.commands import build_lexicon_service
from toolbox_lexicon.config import create_default_config
from toolbox_lexicon.exceptions import ToolboxLexiconException
from toolbox_lexicon.interfaces import PresenterProtocol
from toolbox_lexicon.presenters import ConsolePresenter, JsonPresenter


def search_command(args) -> int:
    """Execute the search subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = matches found, 1 = no matches or failure)
    """
    config = create_default_config(source_location=args.source, max_display_results=args.limit)

    presenter: PresenterProtocol
    if args.json:
        presenter = JsonPresenter()
    else:
        presenter = ConsolePresenter(max_results=config.max_display_results)

    service = build_lexicon_service(config.source_location, config)

    try:
        entries = service.load()
        if not entries:
            presenter.show_warning(f"No entries loaded from {config.source_location}")

        result = service.search(args.query)
    except ToolboxLexiconException as e:
        presenter.show_error(f"Error: {e}")
        return 1

    if result.error:
        presenter.show_error(result.error)

    presenter.show_results(result)
    return 0 if not result.is_empty else 1
