"""
Toolbox Lexicon - Search Tool for SFM/Toolbox Dictionaries

Parses tag-prefixed dictionary text (\\lx, \\sn, \\ge, ...) into lexeme
entries and runs case-insensitive wildcard searches over them.
"""

__version__ = "1.0.0"
__author__ = "Toolbox Lexicon Contributors"
