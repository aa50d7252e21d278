"""CLI command for converting a dictionary to JSON."""

from toolbox_lexicon.cli.commands import build_lexicon_service
from toolbox_lexicon.config import create_default_config
from toolbox_lexicon.presenters import JsonPresenter


def dump_command(args) -> int:
    """Execute the dump subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = entries written, 1 = nothing loaded)
    """
    config = create_default_config(source_location=args.source)
    presenter = JsonPresenter(indent=args.indent)

    service = build_lexicon_service(config.source_location, config)
    entries = service.load()
    presenter.show_entries(entries)

    if not entries:
        presenter.show_warning(f"No entries loaded from {config.source_location}")
        return 1
    return 0
