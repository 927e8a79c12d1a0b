"""Root endpoint negotiation: one request, one response, one result."""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from http import HTTPStatus
from urllib.parse import unquote, urlsplit, urlunsplit

import httpx

from neorest.capabilities.cypher import CypherCapabilities, resolve_capabilities
from neorest.capabilities.version import ServerVersion
from neorest.config import ExecutionConfiguration
from neorest.protocol.root import NodeReference, RootApiResponse, decode_root_response
from neorest.transport.base import Transport, UnexpectedStatusError

logger = logging.getLogger(__name__)

STREAM_HEADER = "X-Stream"

UNEXPECTED_STATUS_MESSAGE = (
    "Received an unexpected HTTP status when executing the request.\r\n\r\n"
    "The response status was: {status_code} {reason}"
)
RESPONSE_BODY_MESSAGE = (
    "\r\n\r\nThe response from the server (which might include useful detail!) was: {body}"
)


@dataclass(frozen=True)
class ConnectionInfo:
    """
    Everything learned from a successful root negotiation.

    Built in one piece so a client either holds all of it or none of it.
    """

    root_api_response: RootApiResponse
    server_version: ServerVersion
    cypher_capabilities: CypherCapabilities
    root_node: NodeReference | None = None

    def __str__(self) -> str:
        return (
            f"ConnectionInfo(version={self.server_version}, "
            f"capabilities={self.cypher_capabilities}, root_node={self.root_node})"
        )


def split_credentials(uri: str) -> tuple[str, str | None, str | None]:
    """
    Separate embedded ``user:password@`` credentials from a URI.

    Returns:
        (uri without credentials, username, password). Username and
        password are percent-decoded and None when absent.
    """
    parts = urlsplit(uri)
    if parts.username is None:
        return uri, None, None

    netloc = parts.netloc.rpartition("@")[2]
    clean = urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))
    password = unquote(parts.password) if parts.password is not None else None
    return clean, unquote(parts.username), password


def basic_auth_value(username: str, password: str | None) -> str:
    """Authorization header value for HTTP Basic auth."""
    token = f"{username}:{password or ''}".encode("utf-8")
    return "Basic " + base64.b64encode(token).decode("ascii")


def status_reason(response: httpx.Response) -> str:
    """Compact status name, e.g. ``InternalServerError`` for 500.

    Codes without a known phrase are reported as ``Unknown``.
    """
    try:
        phrase = HTTPStatus(response.status_code).phrase
    except ValueError:
        phrase = response.reason_phrase
    return "".join(ch for ch in phrase if ch.isalnum()) or "Unknown"


class ConnectionNegotiator:
    """
    Performs the root endpoint exchange for a graph client.

    Builds the GET request against the root URI, validates the response
    status, decodes the root document and derives the server version and
    Cypher capabilities from it.
    """

    def __init__(self, root_uri: str, config: ExecutionConfiguration):
        """
        Initialize the negotiator.

        Args:
            root_uri: Root URI of the server, optionally with user:password.
            config: Execution settings (streaming, user agent, credentials).
        """
        self.root_uri = root_uri
        self.config = config

        self.base_uri, uri_username, uri_password = split_credentials(root_uri)
        if uri_username is not None:
            self.username, self.password = uri_username, uri_password
        elif config.has_credentials:
            self.username, self.password = config.username, config.password
        else:
            self.username, self.password = None, None

    @property
    def has_credentials(self) -> bool:
        return self.username is not None

    def build_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
        }
        if self.username is not None:
            headers["Authorization"] = basic_auth_value(self.username, self.password)
        if self.config.use_json_streaming:
            headers[STREAM_HEADER] = "true"
        return headers

    def build_request(self) -> httpx.Request:
        """Build the GET request for the root endpoint."""
        logger.debug(
            f"Building root request for {self.base_uri} "
            f"(auth={self.has_credentials}, streaming={self.config.use_json_streaming})"
        )
        return httpx.Request("GET", self.base_uri, headers=self.build_headers())

    def check_response(self, response: httpx.Response) -> None:
        """
        Reject any response outside the 2xx range.

        Raises:
            UnexpectedStatusError: With the status code and reason in its message.
        """
        if response.is_success:
            return

        reason = status_reason(response)
        body = response.text.strip()
        message = UNEXPECTED_STATUS_MESSAGE.format(
            status_code=response.status_code,
            reason=reason,
        )
        if body:
            message += RESPONSE_BODY_MESSAGE.format(body=body)

        raise UnexpectedStatusError(
            message,
            status_code=response.status_code,
            reason=reason,
            body=body,
        )

    async def negotiate(self, transport: Transport) -> ConnectionInfo:
        """
        Run the root exchange.

        Args:
            transport: Transport used for the single request.

        Returns:
            ConnectionInfo describing the server.

        Raises:
            UnexpectedStatusError: If the server answers with a non-2xx status.
            DecodeError: If the root document is malformed.
            Exception: Whatever the transport raises, unchanged.
        """
        response = await transport.send(self.build_request())
        self.check_response(response)

        root = decode_root_response(response.content).relative_to(self.base_uri)
        root_node = (
            NodeReference.from_uri(root.reference_node)
            if root.reference_node is not None
            else None
        )
        server_version = root.version
        capabilities = resolve_capabilities(server_version)

        logger.info(
            f"Connected to {self.base_uri}: server version {server_version}, "
            f"{capabilities}"
        )

        return ConnectionInfo(
            root_api_response=root,
            server_version=server_version,
            cypher_capabilities=capabilities,
            root_node=root_node,
        )
