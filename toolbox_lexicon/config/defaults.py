"""Default configuration values for Toolbox Lexicon."""

from .config import LexiconConfig


def create_default_config(**overrides) -> LexiconConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        LexiconConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            source_location="https://example.org/data.txt",
            request_timeout=5.0
        )
    """
    return LexiconConfig(**overrides)
