"""Configuration classes for Toolbox Lexicon."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LexiconConfig:
    """Immutable configuration for loading and searching a lexicon.

    Frozen so a config can be shared between the loader, the search
    service and the presenters without being modified mid-session.
    """

    # Source settings
    source_location: str = "data.txt"  # File path or http(s) URL
    encoding: str = "utf-8"
    request_timeout: float = 10.0  # Seconds
    user_agent: str = "toolbox-lexicon/1.0"

    # Output settings
    log_level: str = "WARNING"
    max_display_results: int = 0  # 0 = show every match

    def __post_init__(self):
        """Normalize the log level name."""
        if isinstance(self.log_level, str):
            object.__setattr__(self, "log_level", self.log_level.upper())
