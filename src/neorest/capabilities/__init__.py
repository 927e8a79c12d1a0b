"""
Server version parsing and Cypher capability resolution.

Maps the version string advertised by the server's root endpoint to
the query dialect the rest of the client must speak.
"""

from neorest.capabilities.version import ServerVersion, parse_server_version
from neorest.capabilities.cypher import (
    CypherCapabilities,
    resolve_capabilities,
    CYPHER_20_MIN_VERSION,
    CYPHER_22_MIN_VERSION,
)

__all__ = [
    "ServerVersion",
    "parse_server_version",
    "CypherCapabilities",
    "resolve_capabilities",
    "CYPHER_20_MIN_VERSION",
    "CYPHER_22_MIN_VERSION",
]
