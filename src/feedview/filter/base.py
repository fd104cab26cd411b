from collections.abc import Sequence
from typing import Protocol

from feedview.data import Article


class ArticleFilter(Protocol):
    """Interface for deriving a filtered view from the article set."""

    def filter(self, articles: Sequence[Article], query: str) -> tuple[Article, ...]:
        """Return the articles matching the query.

        Args:
            articles: The full article set in feed order.
            query: Raw search text. Empty (after trimming) means no filter.

        Returns:
            Matching articles, in the same relative order as the input.
        """
        ...
