"""
HTTP transport layer.

Sends the requests built by the protocol layer and hands back raw
responses.
"""

from neorest.transport.types import TransportConfig, TransportEvent, TransportEventType
from neorest.transport.base import (
    Transport,
    TransportError,
    ConnectionError,
    TimeoutError,
    SessionError,
    UnexpectedStatusError,
)
from neorest.transport.http import HttpxTransport

__all__ = [
    "Transport",
    "TransportConfig",
    "TransportEvent",
    "TransportEventType",
    "TransportError",
    "ConnectionError",
    "TimeoutError",
    "SessionError",
    "UnexpectedStatusError",
    "HttpxTransport",
]
