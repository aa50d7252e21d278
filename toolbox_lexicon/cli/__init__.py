"""Command-line interface for Toolbox Lexicon."""
