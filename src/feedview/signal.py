"""Minimal observer signal used to publish presentation events."""

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class Signal:
    """Synchronous observer-pattern signal.

    Handlers run in connection order on the caller's thread. An exception in
    one handler is logged and does not prevent later handlers from running.
    """

    def __init__(self) -> None:
        self._handlers: list[Callable[..., Any]] = []

    def connect(self, handler: Callable[..., Any]) -> None:
        if handler not in self._handlers:
            self._handlers.append(handler)

    def disconnect(self, handler: Callable[..., Any]) -> None:
        self._handlers.remove(handler)

    def emit(self, *args: Any) -> None:
        for handler in list(self._handlers):
            try:
                handler(*args)
            except Exception:
                logger.exception(f"Signal handler {handler!r} failed")

    @property
    def handler_count(self) -> int:
        return len(self._handlers)
