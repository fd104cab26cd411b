from typing import Protocol

from feedview.data import LoadResult


class ArticleLoader(Protocol):
    """Interface for loading the article feed once at startup."""

    async def load(self) -> LoadResult:
        """Fetch and decode the article feed.

        Returns:
            The decoded articles and last-updated timestamp.

        Raises:
            LoadFailure: If the feed cannot be fetched or is not valid JSON.
        """
        ...
