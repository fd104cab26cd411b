"""Read-only holder for the article set loaded at startup."""

from collections.abc import Iterable, Iterator

from feedview.data import Article


class ArticleStore:
    """Immutable, ordered article set.

    Populated once from the feed loader and shared read-only with the filter.

    Args:
        articles: Articles in feed order (newest first).
    """

    def __init__(self, articles: Iterable[Article] = ()) -> None:
        self._articles: tuple[Article, ...] = tuple(articles)

    @property
    def articles(self) -> tuple[Article, ...]:
        """The full article set in feed order."""
        return self._articles

    def __len__(self) -> int:
        return len(self._articles)

    def __iter__(self) -> Iterator[Article]:
        return iter(self._articles)
