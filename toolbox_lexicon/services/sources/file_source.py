"""Local text sources."""

import logging
from pathlib import Path

from toolbox_lexicon.exceptions import TextSourceError

logger = logging.getLogger(__name__)


class FileTextSource:
    """Read dictionary text from a local file.

    Implements TextSource protocol.
    """

    def __init__(self, path: Path | str, encoding: str = "utf-8"):
        """Initialize with a file path.

        Args:
            path: Path to the dictionary text file.
            encoding: Text encoding of the file.
        """
        self._path = Path(path)
        self._encoding = encoding

    @property
    def name(self) -> str:
        return str(self._path)

    def fetch(self) -> str:
        """Read the whole file.

        Raises:
            TextSourceError: If the file is missing or unreadable.
        """
        if not self._path.exists():
            raise TextSourceError(f"Dictionary file not found: {self._path}")

        try:
            text = self._path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise TextSourceError(f"Error reading {self._path}: {e}") from e

        logger.debug(f"Read {len(text)} characters from {self._path}")
        return text


class StringTextSource:
    """Serve dictionary text already held in memory."""

    def __init__(self, text: str, name: str = "<memory>"):
        self._text = text
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def fetch(self) -> str:
        return self._text
