"""HTTP text source."""

import logging

import requests

from toolbox_lexicon.exceptions import TextSourceError

logger = logging.getLogger(__name__)


class HttpTextSource:
    """Fetch dictionary text from a static HTTP resource.

    Implements TextSource protocol.
    """

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        user_agent: str = "toolbox-lexicon/1.0",
        encoding: str = "utf-8",
    ):
        """Initialize with the resource URL.

        Args:
            url: Address of the dictionary text file.
            timeout: Seconds to wait for the server.
            user_agent: User-Agent header sent with the request.
            encoding: Text encoding of the resource; overrides whatever
                charset the server reports or omits.
        """
        self._url = url
        self._timeout = timeout
        self._user_agent = user_agent
        self._encoding = encoding

    @property
    def name(self) -> str:
        return self._url

    def fetch(self) -> str:
        """Download the dictionary text.

        Raises:
            TextSourceError: On timeouts, connection errors or non-200 responses.
        """
        try:
            response = requests.get(
                self._url,
                headers={"User-Agent": self._user_agent},
                timeout=self._timeout,
            )
        except requests.exceptions.Timeout as e:
            raise TextSourceError(f"Timed out fetching {self._url}") from e
        except requests.RequestException as e:
            raise TextSourceError(f"Error fetching {self._url}: {e}") from e

        if response.status_code != 200:
            raise TextSourceError(f"Fetching {self._url} returned HTTP {response.status_code}")

        response.encoding = self._encoding
        text = response.text
        logger.debug(f"Fetched {len(text)} characters from {self._url}")
        return text
