"""Presenter implementations for output handling."""

from .console_presenter import ConsolePresenter
from .json_presenter import JsonPresenter
from .null_presenter import NullPresenter

__all__ = [
    "ConsolePresenter",
    "JsonPresenter",
    "NullPresenter",
]
