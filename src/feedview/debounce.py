"""Coalescing of rapid query input before it reaches the session."""

import asyncio
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_DELAY = 0.3


class QueryDebouncer:
    """Apply only the last query submitted within ``delay`` seconds.

    Each :meth:`submit` replaces any pending timer, so a burst of keystrokes
    results in a single call to ``apply``. Must be used from a running event
    loop.

    Args:
        apply: Callback receiving the settled query, e.g.
            ``FeedSession.set_query``.
        delay: Quiet period in seconds.
    """

    def __init__(
        self,
        apply: Callable[[str], None],
        *,
        delay: float = DEFAULT_DEBOUNCE_DELAY,
    ) -> None:
        self._apply = apply
        self._delay = delay
        self._timer: asyncio.TimerHandle | None = None
        self._pending: str | None = None

    @property
    def pending(self) -> str | None:
        """The query waiting to be applied, if any."""
        return self._pending

    def submit(self, query: str) -> None:
        self._pending = query
        # Atomic swap: drop the old timer before scheduling the new one
        old_timer = self._timer
        self._timer = None
        if old_timer is not None:
            old_timer.cancel()
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self._delay, self._fire)

    def flush(self) -> None:
        """Apply the pending query now instead of waiting for the timer."""
        if self._timer is not None:
            self._timer.cancel()
        self._fire()

    def cancel(self) -> None:
        """Discard the pending query without applying it."""
        timer = self._timer
        self._timer = None
        if timer is not None:
            timer.cancel()
        self._pending = None

    def _fire(self) -> None:
        self._timer = None
        query = self._pending
        self._pending = None
        if query is None:
            return
        logger.debug(f"Applying debounced query {query!r}")
        self._apply(query)
