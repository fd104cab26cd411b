"""Factory functions to create components from configuration."""

from feedview.config.models import (
    FeedviewConfig,
    FileSourceConfig,
    HttpSourceConfig,
    SourceConfig,
)
from feedview.debounce import QueryDebouncer
from feedview.loader.base import ArticleLoader
from feedview.loader.file import FileArticleLoader
from feedview.loader.http import HttpArticleLoader
from feedview.reveal import ProximityTrigger
from feedview.session import FeedSession


def create_loader(config: SourceConfig) -> ArticleLoader:
    """Create an article loader from config.

    Uses explicit type matching rather than getattr.
    """
    if isinstance(config, HttpSourceConfig):
        return HttpArticleLoader(config.url, timeout=config.timeout)
    if isinstance(config, FileSourceConfig):
        return FileArticleLoader(config.path)
    msg = f"Unknown source config type: {type(config)}"
    raise ValueError(msg)


def create_session(
    config: FeedviewConfig,
    *,
    trigger: ProximityTrigger | None = None,
) -> FeedSession:
    """Create a feed session from the root config.

    Args:
        config: Root configuration.
        trigger: Optional proximity detector for the reveal controller.

    Returns:
        An unstarted FeedSession.
    """
    return FeedSession(
        create_loader(config.source),
        batch_size=config.reveal.batch_size,
        trigger=trigger,
    )


def create_debouncer(config: FeedviewConfig, session: FeedSession) -> QueryDebouncer:
    """Create a query debouncer feeding ``session.set_query``."""
    return QueryDebouncer(session.set_query, delay=config.search.debounce_ms / 1000)
