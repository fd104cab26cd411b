"""Core data models for feedview."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Article:
    """A news article record as delivered by the feed data file.

    Articles carry no identity beyond their position in the feed. The feed is
    expected to be sorted by ``published_at`` (newest first) and is never
    re-sorted.
    """

    title: str
    url: str
    source: str
    published_at: str = ""


@dataclass(frozen=True)
class RevealedArticle:
    """An article handed to the presentation layer.

    ``position`` is the absolute index within the filtered view the article
    was revealed from. It is only meaningful for the current query epoch and
    is not a stable article identity.
    """

    article: Article
    position: int


@dataclass(frozen=True)
class LoadResult:
    """Result of loading the feed data file."""

    articles: tuple[Article, ...] = ()
    last_updated: str | None = None
