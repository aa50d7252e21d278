"""Configuration management for Toolbox Lexicon."""

from .config import LexiconConfig
from .defaults import create_default_config

__all__ = ["LexiconConfig", "create_default_config"]
