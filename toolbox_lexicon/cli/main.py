"""Main CLI entry point for toolbox_lexicon."""

import argparse
import logging
import sys

from toolbox_lexicon import __version__
from toolbox_lexicon.cli.commands import dump, interactive, search
from toolbox_lexicon.config import create_default_config


def configure_logging(level: str) -> None:
    """Send log records to stderr at the given level."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="toolbox-lexicon",
        description="Search SFM/Toolbox dictionary files",
        epilog="Use 'toolbox-lexicon <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # toolbox-lexicon search <source> <query>
    search_parser = subparsers.add_parser(
        "search",
        help="Search a dictionary once",
        description="Print entries whose lexeme, gloss or definition matches QUERY ('*' is a wildcard)",
    )
    search_parser.add_argument("source", help="Dictionary file path or http(s) URL")
    search_parser.add_argument("query", help="Search query, e.g. 'fel*'")
    search_parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )
    search_parser.add_argument(
        "--limit",
        type=int,
        default=0,
        help="Maximum number of entries to print (0 = all)",
    )

    # toolbox-lexicon interactive <source>
    interactive_parser = subparsers.add_parser(
        "interactive",
        help="Search a dictionary repeatedly",
        description="Load a dictionary once, then search for every line typed (empty line clears, :q quits)",
    )
    interactive_parser.add_argument("source", help="Dictionary file path or http(s) URL")
    interactive_parser.add_argument(
        "--limit",
        type=int,
        default=0,
        help="Maximum number of entries to print per search (0 = all)",
    )

    # toolbox-lexicon dump <source>
    dump_parser = subparsers.add_parser(
        "dump",
        help="Convert a dictionary to JSON",
        description="Parse a dictionary and print all entries as JSON",
    )
    dump_parser.add_argument("source", help="Dictionary file path or http(s) URL")
    dump_parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)",
    )

    return parser


def main(argv=None):
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else create_default_config().log_level)

    # Dispatch to appropriate command
    if args.command == "search":
        return search.search_command(args)
    elif args.command == "interactive":
        return interactive.interactive_command(args)
    elif args.command == "dump":
        return dump.dump_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
