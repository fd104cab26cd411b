"""Case-insensitive substring search over article titles."""

from collections.abc import Sequence

from feedview.data import Article


def filter_articles(articles: Sequence[Article], query: str) -> tuple[Article, ...]:
    """Filter articles whose title contains the query, ignoring case.

    Only the title is searched; source, URL and date are not. Feed order is
    preserved and the result is recomputed from scratch on every call.

    Args:
        articles: The full article set in feed order.
        query: Raw search text. Whitespace-only means "show everything".

    Returns:
        The matching articles as an ordered tuple.
    """
    if not query.strip():
        return tuple(articles)
    needle = query.lower()
    return tuple(article for article in articles if needle in article.title.lower())


class TitleFilter:
    """``ArticleFilter`` implementation backed by :func:`filter_articles`."""

    def filter(self, articles: Sequence[Article], query: str) -> tuple[Article, ...]:
        return filter_articles(articles, query)
