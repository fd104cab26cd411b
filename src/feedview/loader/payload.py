"""Decoding of the ``{"articles": [...], "lastUpdated": ...}`` feed payload."""

import logging
from typing import Any

from feedview.data import Article, LoadResult

logger = logging.getLogger(__name__)


def _text(item: dict[str, Any], key: str) -> str:
    value = item.get(key)
    return value if isinstance(value, str) else ""


def parse_payload(data: Any) -> LoadResult:
    """Convert a decoded JSON payload into a ``LoadResult``.

    A payload without a usable ``articles`` list degrades to an empty feed
    rather than failing. Entries that are not objects are skipped.

    Args:
        data: Decoded JSON document.

    Returns:
        Articles in payload order plus the ``lastUpdated`` value, if any.
    """
    if not isinstance(data, dict):
        logger.warning(f"Feed payload is {type(data).__name__}, expected object; using empty feed")
        return LoadResult()

    last_updated = data.get("lastUpdated")
    if not isinstance(last_updated, str):
        last_updated = None

    raw_articles = data.get("articles")
    if not isinstance(raw_articles, list):
        logger.warning("Feed payload has no usable 'articles' list; using empty feed")
        return LoadResult(last_updated=last_updated)

    articles: list[Article] = []
    for index, item in enumerate(raw_articles):
        if not isinstance(item, dict):
            logger.warning(f"Skipping feed entry {index}: not an object")
            continue
        articles.append(
            Article(
                title=_text(item, "title"),
                url=_text(item, "url"),
                source=_text(item, "source"),
                published_at=_text(item, "publishedAt"),
            )
        )

    return LoadResult(articles=tuple(articles), last_updated=last_updated)
