"""CLI subcommands."""

from toolbox_lexicon.config import LexiconConfig
from toolbox_lexicon.services import LexiconService, create_text_source


def build_lexicon_service(source: str, config: LexiconConfig) -> LexiconService:
    """Create a lexicon service for a file path or URL."""
    return LexiconService(create_text_source(source, config), config)
