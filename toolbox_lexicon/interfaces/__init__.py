"""Interface protocols for Toolbox Lexicon."""

from .presenter import PresenterProtocol
from .text_source import TextSource

__all__ = ["PresenterProtocol", "TextSource"]
