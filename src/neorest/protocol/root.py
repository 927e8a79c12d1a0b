"""Root endpoint document: discovered endpoints, version and extensions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any
from urllib.parse import urlsplit

from neorest.capabilities.version import ServerVersion, parse_server_version
from neorest.errors import DecodeError
from neorest.lib import oj

logger = logging.getLogger(__name__)

# Endpoints rewritten relative to the root URI after connecting
ENDPOINT_FIELDS = (
    "node",
    "node_index",
    "relationship_index",
    "batch",
    "extensions_info",
    "cypher",
    "transaction",
)


@dataclass(frozen=True)
class NodeReference:
    """Handle to a node addressed by its numeric id."""

    id: int
    uri: str

    @classmethod
    def from_uri(cls, uri: str) -> "NodeReference":
        """
        Build a reference from a node URI such as ``http://foo/db/data/node/123``.

        Raises:
            DecodeError: If the URI does not end with a numeric id.
        """
        segment = urlsplit(uri).path.rstrip("/").rsplit("/", 1)[-1]
        if not (segment.isascii() and segment.isdigit()):
            raise DecodeError(f"Node URI does not end with a node id: {uri}")
        return cls(id=int(segment), uri=uri)

    def __str__(self) -> str:
        return f"node/{self.id}"


@dataclass(frozen=True)
class RootApiResponse:
    """
    Parsed response of the server's root endpoint.

    Every endpoint is optional; servers only advertise what they serve.
    """

    node: str | None = None
    node_index: str | None = None
    relationship_index: str | None = None
    batch: str | None = None
    extensions_info: str | None = None
    cypher: str | None = None
    transaction: str | None = None

    reference_node: str | None = None
    """Absolute URI of the reference node, if the server exposes one."""

    neo4j_version: str = ""
    """Version string exactly as reported by the server."""

    extensions: dict[str, dict[str, str]] = field(default_factory=dict)
    """Plugin name -> operation name -> endpoint URI."""

    @property
    def version(self) -> ServerVersion:
        """Parsed server version (0.0.0.0 when unknown)."""
        return parse_server_version(self.neo4j_version)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RootApiResponse":
        """
        Create from the decoded root document.

        Raises:
            DecodeError: If a present field has the wrong type.
        """
        values: dict[str, Any] = {
            name: _optional_str(data, name) for name in ENDPOINT_FIELDS
        }
        values["reference_node"] = _optional_str(data, "reference_node")
        values["neo4j_version"] = _optional_str(data, "neo4j_version") or ""
        values["extensions"] = _extensions(data.get("extensions"))
        return cls(**values)

    def relative_to(self, root_uri: str) -> "RootApiResponse":
        """
        Return a copy with endpoints expressed relative to root_uri.

        ``http://foo/db/data/node`` becomes ``/node`` for a root of
        ``http://foo/db/data``. Endpoints outside the root are kept as-is;
        the reference node and extension endpoints are never rewritten.
        """
        base = root_uri.rstrip("/")
        changes = {}
        for name in ENDPOINT_FIELDS:
            value = getattr(self, name)
            if value is not None and _is_under(value, base):
                changes[name] = value[len(base):] or "/"
        return replace(self, **changes)


def decode_root_response(body: bytes | str) -> RootApiResponse:
    """
    Decode a root endpoint response body.

    Args:
        body: Raw JSON response body.

    Returns:
        The parsed RootApiResponse.

    Raises:
        DecodeError: If the body is not a JSON object of the expected shape.
    """
    try:
        data = oj.loads(body)
    except oj.JSONDecodeError as e:
        raise DecodeError(f"Root response is not valid JSON: {e}", cause=e)

    if not isinstance(data, dict):
        raise DecodeError(
            f"Root response must be a JSON object, got {type(data).__name__}"
        )

    root = RootApiResponse.from_dict(data)
    logger.debug(
        f"Decoded root response: version={root.neo4j_version!r}, "
        f"extensions={sorted(root.extensions)}"
    )
    return root


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise DecodeError(f"Expected '{key}' to be a string, got {type(value).__name__}")


def _extensions(value: Any) -> dict[str, dict[str, str]]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise DecodeError(
            f"Expected 'extensions' to be an object, got {type(value).__name__}"
        )

    extensions: dict[str, dict[str, str]] = {}
    for plugin, operations in value.items():
        if not isinstance(operations, dict):
            raise DecodeError(f"Extension '{plugin}' must be an object")
        extensions[plugin] = {
            name: _optional_str(operations, name) or "" for name in operations
        }
    return extensions


def _is_under(uri: str, base: str) -> bool:
    if not uri.startswith(base):
        return False
    rest = uri[len(base):]
    return rest == "" or rest[0] in "/?#"
