"""Base exception classes for Toolbox Lexicon."""


class ToolboxLexiconException(Exception):
    """Base exception for all Toolbox Lexicon errors.

    All custom exceptions in the toolbox_lexicon package should inherit
    from this base class for consistent error handling.
    """

    pass
