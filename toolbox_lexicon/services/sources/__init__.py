"""Text source implementations."""

from .file_source import FileTextSource, StringTextSource
from .http_source import HttpTextSource

__all__ = ["FileTextSource", "HttpTextSource", "StringTextSource", "create_text_source"]


def create_text_source(location: str, config=None):
    """Pick a text source for a location.

    Args:
        location: ``http://`` or ``https://`` URL, or a local file path
        config: Optional LexiconConfig supplying encoding, timeout and user agent

    Returns:
        HttpTextSource for URLs, FileTextSource otherwise
    """
    if location.startswith(("http://", "https://")):
        if config is None:
            return HttpTextSource(location)
        return HttpTextSource(
            location,
            timeout=config.request_timeout,
            user_agent=config.user_agent,
            encoding=config.encoding,
        )

    if config is None:
        return FileTextSource(location)
    return FileTextSource(location, encoding=config.encoding)
