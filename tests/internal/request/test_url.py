"""Tests for URL composition."""

import uuid

from fluentrest._internal.request.models import ObjectId
from fluentrest._internal.request.url import compose_url


class TestComposeUrl:
    """Tests for compose_url()."""

    def test_base_and_endpoint(self):
        """Should join base URL and endpoint."""
        assert compose_url("http://h", "things") == "http://h/things"

    def test_with_id(self):
        """Should append the id after the endpoint."""
        assert compose_url("http://h", "things", "42") == "http://h/things/42"

    def test_with_id_and_resource(self):
        """Should append the resource after the id."""
        assert compose_url("http://h", "things", "42", "sub") == "http://h/things/42/sub"

    def test_with_resource_only(self):
        """Should append the resource directly after the endpoint."""
        assert compose_url("http://h", "things", resource_path="sub") == "http://h/things/sub"

    def test_renders_object_id_value(self):
        """Should render an ObjectId as its value."""
        assert compose_url("http://h", "things", ObjectId(value="abc")) == "http://h/things/abc"

    def test_renders_non_string_ids(self):
        """Should render ints and UUIDs with str()."""
        ident = uuid.UUID("12345678-1234-5678-1234-567812345678")
        assert compose_url("http://h", "things", 7) == "http://h/things/7"
        assert compose_url("http://h", "things", ident) == f"http://h/things/{ident}"

    def test_zero_id_is_rendered(self):
        """A falsy id other than None should still be rendered."""
        assert compose_url("http://h", "things", 0) == "http://h/things/0"

    def test_segments_are_not_encoded(self):
        """Should leave segments untouched."""
        assert compose_url("http://h", "a b", resource_path="c?d") == "http://h/a b/c?d"
