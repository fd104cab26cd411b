"""Contract for the external "end of list is near the viewport" detector."""

from collections.abc import Callable
from typing import Protocol


class ProximityTrigger(Protocol):
    """Interface for a viewport-proximity detector.

    The reveal controller arms the trigger while more batches remain and
    disarms it once the filtered view is exhausted. The trigger knows nothing
    about articles; it only invokes the armed callback.
    """

    def arm(self, callback: Callable[[], None]) -> None:
        """Start observing and invoke ``callback`` whenever proximity is detected."""
        ...

    def disarm(self) -> None:
        """Stop observing. Must be safe to call when already disarmed."""
        ...


class ManualProximityTrigger:
    """In-memory trigger fired explicitly by the caller.

    Used by the CLI to page through results and by tests to simulate rapid
    scroll events.
    """

    def __init__(self) -> None:
        self._callback: Callable[[], None] | None = None

    @property
    def armed(self) -> bool:
        """Whether a callback is currently installed."""
        return self._callback is not None

    def arm(self, callback: Callable[[], None]) -> None:
        self._callback = callback

    def disarm(self) -> None:
        self._callback = None

    def fire(self) -> bool:
        """Deliver one proximity event.

        Returns:
            True if an armed callback was invoked, False if disarmed.
        """
        if self._callback is None:
            return False
        self._callback()
        return True
