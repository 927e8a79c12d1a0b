"""
Connection protocol.

Root endpoint negotiation, the root document model and the connection
state machine.
"""

from neorest.protocol.root import (
    RootApiResponse,
    NodeReference,
    decode_root_response,
    ENDPOINT_FIELDS,
)
from neorest.protocol.negotiation import (
    ConnectionNegotiator,
    ConnectionInfo,
    split_credentials,
    basic_auth_value,
    STREAM_HEADER,
)
from neorest.protocol.state import (
    ConnectionState,
    ConnectionStateMachine,
    InvalidStateTransition,
)

__all__ = [
    # Root document
    "RootApiResponse",
    "NodeReference",
    "decode_root_response",
    "ENDPOINT_FIELDS",
    # Negotiation
    "ConnectionNegotiator",
    "ConnectionInfo",
    "split_credentials",
    "basic_auth_value",
    "STREAM_HEADER",
    # State
    "ConnectionState",
    "ConnectionStateMachine",
    "InvalidStateTransition",
]
