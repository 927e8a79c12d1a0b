"""Abstract base transport and error types."""

import logging
from abc import ABC, abstractmethod
from typing import Callable

import httpx

from neorest.transport.types import TransportConfig, TransportEvent

logger = logging.getLogger(__name__)


class TransportError(Exception):
    """Base exception for transport errors."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class ConnectionError(TransportError):
    """Failed to reach the server."""

    pass


class TimeoutError(TransportError):
    """Request or connection timed out."""

    pass


class SessionError(TransportError):
    """The transport is closed or otherwise unusable."""

    pass


class UnexpectedStatusError(TransportError):
    """The server answered with a status outside the 2xx range."""

    def __init__(
        self,
        message: str,
        status_code: int,
        reason: str,
        body: str = "",
    ):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.body = body


class Transport(ABC):
    """
    Abstract base class for HTTP transports.

    A transport performs exactly one request/response exchange per
    send() call. Retries, timeouts and connection pooling belong to the
    implementation, not to its callers.
    """

    def __init__(self, config: TransportConfig | None = None):
        self.config = config or TransportConfig()
        self._event_handlers: list[Callable[[TransportEvent], None]] = []

    def on_event(self, handler: Callable[[TransportEvent], None]) -> None:
        """
        Register an event handler for transport events.

        Args:
            handler: Callback invoked when transport events occur.
        """
        self._event_handlers.append(handler)

    def _emit_event(self, event: TransportEvent) -> None:
        """Emit an event to all registered handlers."""
        for handler in self._event_handlers:
            try:
                handler(event)
            except Exception:
                # Don't let handler errors affect transport
                logger.exception(f"Transport event handler failed for {event}")

    @abstractmethod
    async def send(self, request: httpx.Request) -> httpx.Response:
        """
        Send a request and return the server's response.

        Args:
            request: Fully built request, headers included.

        Returns:
            The response, whatever its status code.

        Raises:
            TransportError: If the request could not be transmitted.
            TimeoutError: If the exchange timed out.
            SessionError: If the transport has been closed.
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """
        Release all resources.

        This method should be safe to call multiple times.
        """
        pass

    async def __aenter__(self) -> "Transport":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()
