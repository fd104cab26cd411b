"""Feed viewing session: load once, then filter and reveal on query changes."""

import logging
from enum import StrEnum

from feedview.errors import LoadFailure
from feedview.filter import ArticleFilter, TitleFilter
from feedview.loader.base import ArticleLoader
from feedview.reveal import DEFAULT_BATCH_SIZE, ProximityTrigger, RevealController
from feedview.signal import Signal
from feedview.store import ArticleStore

logger = logging.getLogger(__name__)


class SessionState(StrEnum):
    """Lifecycle of a ``FeedSession``."""

    PENDING = "pending"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class FeedSession:
    """Owns the article store, the current query and the reveal controller.

    Flow:
    1. :meth:`start` loads the feed once and shows the unfiltered list
    2. Every :meth:`set_query` recomputes the filtered view and resets the
       reveal controller to its first batch
    3. Proximity signals reveal further batches via ``controller``

    A load failure is terminal: ``load_failed`` fires once and the session
    ignores all later queries.

    Signals:
        count_changed(int): Size of the filtered view after each query.
        last_updated_changed(str | None): Feed timestamp after loading.
        load_failed(str): User-facing failure message.

    Args:
        loader: Source of the article feed.
        batch_size: Articles revealed per step.
        trigger: Optional proximity detector handed to the controller.
        article_filter: Filter strategy (defaults to title substring match).
    """

    def __init__(
        self,
        loader: ArticleLoader,
        *,
        batch_size: int = DEFAULT_BATCH_SIZE,
        trigger: ProximityTrigger | None = None,
        article_filter: ArticleFilter | None = None,
    ) -> None:
        self._loader = loader
        self._filter: ArticleFilter = article_filter or TitleFilter()
        self._store = ArticleStore()
        self._query = ""
        self._filtered_count = 0
        self._state = SessionState.PENDING
        self._last_updated: str | None = None

        self.controller = RevealController(batch_size=batch_size, trigger=trigger)

        self.count_changed = Signal()
        self.last_updated_changed = Signal()
        self.load_failed = Signal()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def store(self) -> ArticleStore:
        return self._store

    @property
    def query(self) -> str:
        return self._query

    @property
    def filtered_count(self) -> int:
        return self._filtered_count

    @property
    def last_updated(self) -> str | None:
        return self._last_updated

    async def start(self) -> bool:
        """Load the feed and show the first batch for the current query.

        Returns:
            True if the feed loaded, False if the session failed.

        Raises:
            RuntimeError: If the session was already started.
        """
        if self._state is not SessionState.PENDING:
            raise RuntimeError(f"Session already started (state: {self._state})")

        self._state = SessionState.LOADING
        try:
            result = await self._loader.load()
        except LoadFailure as e:
            logger.error(f"Failed to load articles: {e}")
            self._state = SessionState.FAILED
            self.load_failed.emit(str(e))
            return False

        self._store = ArticleStore(result.articles)
        self._last_updated = result.last_updated
        self._state = SessionState.READY
        logger.info(f"Loaded {len(self._store)} articles (last updated: {result.last_updated})")

        self.last_updated_changed.emit(result.last_updated)
        self._apply()
        return True

    def set_query(self, query: str) -> None:
        """Apply a new search query.

        Before the feed has loaded the query is only remembered; after a
        load failure it is ignored.
        """
        self._query = query
        if self._state is SessionState.READY:
            self._apply()
        elif self._state is SessionState.FAILED:
            logger.debug("Ignoring query on failed session")

    def clear_query(self) -> None:
        self.set_query("")

    def _apply(self) -> None:
        view = self._filter.filter(self._store.articles, self._query)
        self._filtered_count = len(view)
        logger.info(f"Query {self._query!r} matched {len(view)} articles")
        self.controller.reset(view)
        self.count_changed.emit(len(view))
