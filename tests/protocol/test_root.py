"""Tests for root document decoding."""

import pytest

from neorest.errors import DecodeError
from neorest.lib import oj
from neorest.protocol.root import NodeReference, RootApiResponse, decode_root_response


class TestDecodeRootResponse:
    """Tests for decode_root_response."""

    def test_decodes_full_document(self, root_payload):
        root = decode_root_response(oj.dumps(root_payload))

        assert root.node == "http://foo/db/data/node"
        assert root.reference_node == "http://foo/db/data/node/123"
        assert root.neo4j_version == "1.5.M02"
        assert root.extensions["GremlinPlugin"]["execute_script"].endswith(
            "/execute_script"
        )

    def test_accepts_text_body(self):
        root = decode_root_response('{"neo4j_version": "2.2.0"}')
        assert str(root.version) == "2.2.0.0"

    def test_missing_optional_fields_are_absent(self):
        root = decode_root_response(b"{}")

        assert root.reference_node is None
        assert root.cypher is None
        assert root.transaction is None
        assert root.neo4j_version == ""
        assert root.extensions == {}
        assert root.version.is_zero

    def test_empty_extensions_decode_to_empty_mapping(self):
        root = decode_root_response(b'{"extensions": {}}')
        assert root.extensions == {}

    def test_null_fields_are_absent(self):
        root = decode_root_response(b'{"reference_node": null, "extensions": null}')
        assert root.reference_node is None
        assert root.extensions == {}

    def test_invalid_json_raises(self):
        with pytest.raises(DecodeError, match="not valid JSON"):
            decode_root_response(b"{not json")

    def test_non_object_raises(self):
        with pytest.raises(DecodeError, match="must be a JSON object"):
            decode_root_response(b"[]")

    def test_non_string_endpoint_raises(self):
        with pytest.raises(DecodeError, match="'node'"):
            decode_root_response(b'{"node": 42}')

    def test_non_object_extensions_raise(self):
        with pytest.raises(DecodeError, match="'extensions'"):
            decode_root_response(b'{"extensions": ["GremlinPlugin"]}')

    def test_non_object_plugin_raises(self):
        with pytest.raises(DecodeError, match="GremlinPlugin"):
            decode_root_response(b'{"extensions": {"GremlinPlugin": "x"}}')


class TestRelativeTo:
    """Tests for RootApiResponse.relative_to."""

    def test_strips_root_prefix(self, root_payload):
        root = RootApiResponse.from_dict(root_payload).relative_to("http://foo/db/data")

        assert root.node == "/node"
        assert root.node_index == "/index/node"
        assert root.batch == "/batch"
        assert root.extensions_info == "/ext"

    def test_trailing_slash_on_root(self, root_payload):
        root = RootApiResponse.from_dict(root_payload).relative_to("http://foo/db/data/")
        assert root.node == "/node"

    def test_reference_node_and_extensions_untouched(self, root_payload):
        original = RootApiResponse.from_dict(root_payload)
        root = original.relative_to("http://foo/db/data")

        assert root.reference_node == original.reference_node
        assert root.extensions == original.extensions

    def test_endpoint_outside_root_is_kept(self):
        root = RootApiResponse(
            node="http://other/db/data/node",
            batch="http://foo/db/database/batch",
        ).relative_to("http://foo/db/data")

        assert root.node == "http://other/db/data/node"
        assert root.batch == "http://foo/db/database/batch"

    def test_does_not_mutate_original(self, root_payload):
        original = RootApiResponse.from_dict(root_payload)
        original.relative_to("http://foo/db/data")
        assert original.node == "http://foo/db/data/node"


class TestNodeReference:
    """Tests for NodeReference.from_uri."""

    def test_parses_trailing_id(self):
        ref = NodeReference.from_uri("http://foo/db/data/node/123")
        assert ref.id == 123
        assert ref.uri == "http://foo/db/data/node/123"

    def test_tolerates_trailing_slash(self):
        assert NodeReference.from_uri("http://foo/db/data/node/7/").id == 7

    def test_non_numeric_id_raises(self):
        with pytest.raises(DecodeError):
            NodeReference.from_uri("http://foo/db/data/node/abc")

    @pytest.mark.parametrize("segment", ["\u00b2", "\u0663", "12\u00b3"])
    def test_non_ascii_digits_raise(self, segment):
        with pytest.raises(DecodeError):
            NodeReference.from_uri(f"http://foo/db/data/node/{segment}")

    def test_str(self):
        assert str(NodeReference(id=5, uri="/node/5")) == "node/5"
