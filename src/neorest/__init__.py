"""
neorest: connection layer of a REST client for graph database servers.

Connecting performs one round trip to the server's root endpoint, which
advertises the server's sub-resource endpoints and version. The version
decides which Cypher dialect the rest of the client speaks.

Submodules:
- transport: HTTP transport (httpx)
- protocol: root document, negotiation and connection state machine
- capabilities: server version parsing and Cypher capability resolution
- config: execution configuration and server profiles
- events: operation completed notifications
"""

from neorest.config import (
    CLIENT_VERSION,
    PRODUCT_NAME,
    ExecutionConfiguration,
    ServerProfile,
    load_server_profiles,
)
from neorest.errors import (
    GraphClientError,
    NotConnectedError,
    DecodeError,
    NOT_CONNECTED_MESSAGE,
)
from neorest.events import OperationCompletedEvent, OperationCompletedNotifier

# Transport layer
from neorest.transport import (
    Transport,
    TransportConfig,
    HttpxTransport,
    TransportError,
    ConnectionError,
    TimeoutError,
    SessionError,
    UnexpectedStatusError,
)

# Capabilities
from neorest.capabilities import (
    ServerVersion,
    parse_server_version,
    CypherCapabilities,
    resolve_capabilities,
)

# Protocol layer
from neorest.protocol import (
    RootApiResponse,
    NodeReference,
    ConnectionInfo,
    ConnectionNegotiator,
    ConnectionState,
)

from neorest.client import GraphClient

__version__ = CLIENT_VERSION

__all__ = [
    "GraphClient",
    # Config
    "CLIENT_VERSION",
    "PRODUCT_NAME",
    "ExecutionConfiguration",
    "ServerProfile",
    "load_server_profiles",
    # Errors
    "GraphClientError",
    "NotConnectedError",
    "DecodeError",
    "NOT_CONNECTED_MESSAGE",
    # Events
    "OperationCompletedEvent",
    "OperationCompletedNotifier",
    # Transport
    "Transport",
    "TransportConfig",
    "HttpxTransport",
    "TransportError",
    "ConnectionError",
    "TimeoutError",
    "SessionError",
    "UnexpectedStatusError",
    # Capabilities
    "ServerVersion",
    "parse_server_version",
    "CypherCapabilities",
    "resolve_capabilities",
    # Protocol
    "RootApiResponse",
    "NodeReference",
    "ConnectionInfo",
    "ConnectionNegotiator",
    "ConnectionState",
]
