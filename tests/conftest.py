"""Pytest configuration and fixtures."""

import copy

import httpx
import pytest

from neorest.transport.base import Transport


ROOT_PAYLOAD = {
    "cypher": "http://foo/db/data/cypher",
    "batch": "http://foo/db/data/batch",
    "node": "http://foo/db/data/node",
    "node_index": "http://foo/db/data/index/node",
    "relationship_index": "http://foo/db/data/index/relationship",
    "reference_node": "http://foo/db/data/node/123",
    "neo4j_version": "1.5.M02",
    "extensions_info": "http://foo/db/data/ext",
    "extensions": {
        "GremlinPlugin": {
            "execute_script": "http://foo/db/data/ext/GremlinPlugin/graphdb/execute_script"
        }
    },
}


class StubTransport(Transport):
    """
    Transport double that records requests.

    Replies with the queued responses in order; raises `error` if set, and
    NotImplementedError once the queue is empty.
    """

    def __init__(self, *responses: httpx.Response, error: Exception | None = None):
        super().__init__()
        self.responses = list(responses)
        self.error = error
        self.requests: list[httpx.Request] = []
        self.closed = False

    async def send(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if not self.responses:
            raise NotImplementedError("No response queued")
        return self.responses.pop(0)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def root_payload():
    """Root document of a 1.5.M02 server."""
    return copy.deepcopy(ROOT_PAYLOAD)


@pytest.fixture
def root_payload_for():
    """Build a root document advertising the given version."""

    def build(version: str) -> dict:
        payload = copy.deepcopy(ROOT_PAYLOAD)
        payload["neo4j_version"] = version
        payload["transaction"] = "http://foo/db/data/transaction"
        payload.pop("reference_node")
        return payload

    return build


@pytest.fixture
def stub_transport():
    """Factory for StubTransport instances."""
    return StubTransport
