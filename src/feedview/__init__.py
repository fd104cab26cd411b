"""feedview: incremental, searchable presentation of a pre-built news feed."""

from feedview.config import FeedviewConfig, create_session, load_config
from feedview.data import Article, LoadResult, RevealedArticle
from feedview.debounce import QueryDebouncer
from feedview.errors import FeedviewError, LoadFailure
from feedview.filter import ArticleFilter, TitleFilter, filter_articles
from feedview.formatting import (
    format_last_updated,
    format_published_at,
    short_source,
    stagger_delay_ms,
)
from feedview.loader import ArticleLoader, FileArticleLoader, HttpArticleLoader, parse_payload
from feedview.reveal import (
    DEFAULT_BATCH_SIZE,
    ManualProximityTrigger,
    ProximityTrigger,
    RevealController,
)
from feedview.session import FeedSession, SessionState
from feedview.signal import Signal
from feedview.store import ArticleStore

__all__ = [
    # Models
    "Article",
    "LoadResult",
    "RevealedArticle",
    # Errors
    "FeedviewError",
    "LoadFailure",
    # Protocols
    "ArticleFilter",
    "ArticleLoader",
    "ProximityTrigger",
    # Core
    "ArticleStore",
    "DEFAULT_BATCH_SIZE",
    "FeedSession",
    "RevealController",
    "SessionState",
    "Signal",
    "TitleFilter",
    "filter_articles",
    # Loaders
    "FileArticleLoader",
    "HttpArticleLoader",
    "parse_payload",
    # Input helpers
    "ManualProximityTrigger",
    "QueryDebouncer",
    # Formatting
    "format_last_updated",
    "format_published_at",
    "short_source",
    "stagger_delay_ms",
    # Config
    "FeedviewConfig",
    "create_session",
    "load_config",
]
