"""Parsing, search and loading services for Toolbox Lexicon."""

from .entry_builder import EntryBuilder, EntryParserService, ParserState, parse_text
from .lexicon_service import LexiconService
from .query_compiler import compile_query
from .search_filter import filter_entries, search_entries
from .sources import FileTextSource, HttpTextSource, StringTextSource, create_text_source
from .tag_reader import Tag, TagLine, classify, iter_lines, read_tag_lines

__all__ = [
    "Tag",
    "TagLine",
    "iter_lines",
    "classify",
    "read_tag_lines",
    "EntryBuilder",
    "EntryParserService",
    "ParserState",
    "parse_text",
    "compile_query",
    "filter_entries",
    "search_entries",
    "LexiconService",
    "FileTextSource",
    "HttpTextSource",
    "StringTextSource",
    "create_text_source",
]
