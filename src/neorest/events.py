"""Operation lifecycle notifications."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass
class OperationCompletedEvent:
    """Outcome of one client operation, successful or not."""

    query_text: str
    """What was executed; ``"Connect"`` for connection attempts."""

    time_taken: float
    """Wall-clock duration in seconds."""

    resources_returned: int = 0
    exception: BaseException | None = None

    @property
    def has_exception(self) -> bool:
        return self.exception is not None

    def __str__(self) -> str:
        base = f"[{self.query_text}] {self.time_taken:.3f}s"
        if self.exception is not None:
            base += f" error={type(self.exception).__name__}: {self.exception}"
        return base


OperationCompletedHandler = Callable[[OperationCompletedEvent], None]


class OperationCompletedNotifier:
    """
    Callback registry for operation completion.

    Handlers run in registration order. A failing handler is logged and
    skipped; it never changes the outcome of the operation it observes.
    """

    def __init__(self) -> None:
        self._handlers: list[OperationCompletedHandler] = []

    def subscribe(self, handler: OperationCompletedHandler) -> None:
        self._handlers.append(handler)

    def unsubscribe(self, handler: OperationCompletedHandler) -> None:
        try:
            self._handlers.remove(handler)
        except ValueError:
            pass

    def fire(self, event: OperationCompletedEvent) -> None:
        """Deliver an event to every handler."""
        for handler in list(self._handlers):
            try:
                handler(event)
            except Exception:
                logger.exception(f"Operation completed handler failed for {event}")

    def __len__(self) -> int:
        return len(self._handlers)
