"""Incremental reveal of a filtered article view in fixed-size batches."""

import logging
from collections.abc import Sequence

from feedview.data import Article, RevealedArticle
from feedview.reveal.proximity import ProximityTrigger
from feedview.signal import Signal

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE: int = 20


class RevealController:
    """Owns the reveal cursor over the current filtered view.

    Each :meth:`reset` starts a new epoch: the view is replaced, the cursor
    returns to 0 and the first batch is published through ``replaced``.
    Further batches are published through ``appended`` on
    :meth:`reveal_next`, which is guarded against re-entry so that a burst
    of proximity signals advances the cursor one batch at a time.

    Signals:
        replaced(list[RevealedArticle]): First batch of a new view; empty
            list when the view has no articles.
        appended(list[RevealedArticle]): A subsequent batch.
        exhausted(): The last article of the view has been revealed.

    Args:
        batch_size: Number of articles revealed per step.
        trigger: Optional proximity detector, armed while batches remain.
    """

    def __init__(
        self,
        *,
        batch_size: int = DEFAULT_BATCH_SIZE,
        trigger: ProximityTrigger | None = None,
    ) -> None:
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        self._batch_size = batch_size
        self._trigger = trigger

        # State
        self._view: tuple[Article, ...] = ()
        self._cursor: int = 0
        self._loading: bool = False
        self._epoch: int = 0

        self.replaced = Signal()
        self.appended = Signal()
        self.exhausted = Signal()

    # -- properties --------------------------------------------------------

    @property
    def batch_size(self) -> int:
        return self._batch_size

    @property
    def view(self) -> tuple[Article, ...]:
        return self._view

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def has_more(self) -> bool:
        return self._cursor < len(self._view)

    @property
    def revealed(self) -> tuple[Article, ...]:
        """Articles revealed so far in the current epoch."""
        return self._view[: self._cursor]

    # -- public API --------------------------------------------------------

    def reset(self, view: Sequence[Article]) -> list[RevealedArticle]:
        """Install a new filtered view and reveal its first batch.

        Clears the loading flag unconditionally: a batch still marked as in
        flight belongs to the discarded view.

        Returns:
            The first batch (empty if the view is empty).
        """
        self._epoch += 1
        self._view = tuple(view)
        self._cursor = 0
        self._loading = False

        if not self._view:
            logger.debug("Reset to empty view")
            self._disarm()
            self.replaced.emit([])
            return []

        logger.debug(f"Reset to view of {len(self._view)} articles")
        epoch = self._epoch
        batch = self._step(self.replaced)
        # Arm only once the first batch is published so an eager detector
        # cannot append ahead of the replacement.
        if self._trigger is not None and epoch == self._epoch and self.has_more:
            self._trigger.arm(self.on_proximity_signal)
        return batch

    def reveal_next(self) -> list[RevealedArticle]:
        """Reveal the next batch of the current view.

        No-op while another step is in progress or once the view is exhausted.

        Returns:
            The revealed batch, or an empty list if nothing was revealed.
        """
        if self._loading:
            logger.debug("Reveal already in progress, ignoring request")
            return []
        if not self.has_more:
            self._disarm()
            return []
        return self._step(self.appended)

    def on_proximity_signal(self) -> None:
        """Handle the external "end of list is near" event."""
        self.reveal_next()

    # -- internal ----------------------------------------------------------

    def _step(self, signal: Signal) -> list[RevealedArticle]:
        epoch = self._epoch
        self._loading = True
        try:
            start = self._cursor
            end = min(start + self._batch_size, len(self._view))
            batch = [
                RevealedArticle(article=article, position=start + offset)
                for offset, article in enumerate(self._view[start:end])
            ]
            self._cursor = end
            logger.debug(f"Revealed articles {start}-{end} of {len(self._view)}")

            signal.emit(batch)

            # A handler may have reset the controller; the new epoch owns the state.
            if epoch == self._epoch and not self.has_more:
                self._disarm()
                self.exhausted.emit()
        finally:
            if epoch == self._epoch:
                self._loading = False
        return batch

    def _disarm(self) -> None:
        if self._trigger is not None:
            self._trigger.disarm()
