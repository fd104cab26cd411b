from __future__ import annotations

import logging

import httpx

from feedview.data import LoadResult
from feedview.errors import LoadFailure
from feedview.loader.payload import parse_payload

logger = logging.getLogger(__name__)


class HttpArticleLoader:
    """Load the article feed over HTTP.

    Args:
        url: Location of the feed JSON document.
        timeout: Request timeout in seconds.
    """

    def __init__(self, url: str, *, timeout: float = 30.0) -> None:
        self._url = url
        self._timeout = timeout

    @property
    def url(self) -> str:
        return self._url

    async def load(self) -> LoadResult:
        """Fetch and decode the feed.

        Raises:
            LoadFailure: On transport errors, non-2xx responses or a body that
                is not valid UTF-8 JSON.
        """
        logger.info(f"Fetching articles from {self._url}")
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(self._url)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            raise LoadFailure(f"Failed to fetch {self._url}: {e}") from e
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError
            raise LoadFailure(f"Invalid JSON from {self._url}: {e}") from e

        return parse_payload(data)
