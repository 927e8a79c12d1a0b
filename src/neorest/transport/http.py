"""httpx-backed transport implementation."""

from __future__ import annotations

import time

import httpx

from neorest.transport.base import (
    Transport,
    TransportError,
    ConnectionError,
    TimeoutError,
    SessionError,
)
from neorest.transport.types import (
    TransportConfig,
    TransportEvent,
    TransportEventType,
)


class HttpxTransport(Transport):
    """
    HTTP transport over an httpx.AsyncClient.

    The client is created on the first send() and reused until close().
    A custom httpx transport (for example httpx.MockTransport) may be
    supplied to replace the network layer.
    """

    def __init__(
        self,
        config: TransportConfig | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(config)
        self._http_transport = http_transport
        self._client: httpx.AsyncClient | None = None
        self._closed: bool = False
        self._timeout = httpx.Timeout(
            connect=self.config.connect_timeout,
            read=self.config.timeout,
            write=self.config.timeout,
            pool=self.config.timeout,
        )

    @property
    def is_closed(self) -> bool:
        """True once close() has been called."""
        return self._closed

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            # Auth is built by the caller; never let httpx derive it from the environment
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                verify=self.config.verify_ssl,
                transport=self._http_transport,
                trust_env=False,
            )
        return self._client

    async def send(self, request: httpx.Request) -> httpx.Response:
        """Send a request with a single attempt."""
        if self._closed:
            raise SessionError("Transport is closed")

        client = self._get_client()

        # Requests built outside the client carry neither its headers nor its timeouts
        for name, value in self.config.headers.items():
            if name not in request.headers:
                request.headers[name] = value
        request.extensions.setdefault("timeout", self._timeout.as_dict())

        self._emit_event(
            TransportEvent(
                type=TransportEventType.REQUEST_SENT,
                timestamp=time.time(),
                data={"method": request.method, "url": str(request.url)},
            )
        )

        try:
            response = await client.send(request)
        except httpx.TimeoutException as e:
            self._emit_error(e)
            raise TimeoutError(f"Request timed out: {e}", cause=e)
        except httpx.ConnectError as e:
            self._emit_error(e)
            raise ConnectionError(f"Could not connect to {request.url.host}: {e}", cause=e)
        except httpx.HTTPError as e:
            self._emit_error(e)
            raise TransportError(f"HTTP error: {e}", cause=e)

        self._emit_event(
            TransportEvent(
                type=TransportEventType.RESPONSE_RECEIVED,
                timestamp=time.time(),
                data={"status_code": response.status_code},
            )
        )
        return response

    def _emit_error(self, error: Exception) -> None:
        self._emit_event(
            TransportEvent(
                type=TransportEventType.ERROR,
                timestamp=time.time(),
                error=error,
            )
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._closed:
            return

        self._closed = True

        if self._client:
            await self._client.aclose()
            self._client = None

        self._emit_event(
            TransportEvent(
                type=TransportEventType.CLOSED,
                timestamp=time.time(),
            )
        )
