"""
Tests for the HTTP Transport and Response Normalizer

Uses httpx.MockTransport so each test decides exactly what the "server"
returns, including failures that never reach HTTP.
"""

import json

import httpx
import pytest

from bookcheck.clients.http import (
    RequestDescriptor,
    ResponseEnvelope,
    Transport,
    build_headers,
    parse_body,
    serialize_payload,
)
from bookcheck.config import Settings
from bookcheck.exceptions import TransportError
from bookcheck.schemas import BookCreate, BookUpdate


class TestParseBody:
    """parse_body never raises."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (b'{"success": true}', {"success": True}),
            ('[1, "two"]', [1, "two"]),
            (b"42", 42),
            (b"null", None),
        ],
    )
    def test_json(self, raw, expected):
        """Valid JSON of any kind is decoded."""
        assert parse_body(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [
            b"",
            "",
            None,
            b"<html><body>Cannot PATCH /books/1</body></html>",
            b'{"success": tru',
            b"\xff\xfe\xfa",
            b"NaN",
            b'{"publishedYear": Infinity}',
        ],
    )
    def test_not_json(self, raw):
        """Bodies that are not strict JSON become None."""
        assert parse_body(raw) is None

    def test_too_deeply_nested(self):
        """Nesting past the recursion limit is not JSON we can use."""
        assert parse_body(b"[" * 100_000 + b"]" * 100_000) is None


class TestBuildHeaders:
    """Tests for build_headers."""

    def test_defaults(self):
        """Only the JSON content type is set by default."""
        assert build_headers() == {"Content-Type": "application/json"}

    def test_bearer_token(self):
        """A token becomes a Bearer Authorization header."""
        headers = build_headers("abc.def.ghi")

        assert headers["Authorization"] == "Bearer abc.def.ghi"

    def test_extra_headers_win(self):
        """Extra headers override the defaults."""
        headers = build_headers("t", extra={"Content-Type": "text/plain", "X-Trace": "1"})

        assert headers == {
            "Content-Type": "text/plain",
            "Authorization": "Bearer t",
            "X-Trace": "1",
        }

    def test_no_content_type(self):
        """Content-Type can be left out."""
        assert build_headers(content_type=None) == {}


class TestSerializePayload:
    """Models are sent by alias with unset fields left out."""

    def test_update_model_sends_only_set_fields(self):
        """Unset update fields are not sent."""
        assert serialize_payload(BookUpdate(available=False)) == {"available": False}

    def test_create_model_uses_aliases(self):
        """Models are sent with camelCase names."""
        payload = BookCreate(
            title="Dune",
            author="Frank Herbert",
            isbn="978-0441172719",
            published_year=1965,
        )

        assert serialize_payload(payload) == {
            "title": "Dune",
            "author": "Frank Herbert",
            "isbn": "978-0441172719",
            "publishedYear": 1965,
        }

    def test_mapping_copied_as_is(self):
        """Mappings are copied without changes."""
        payload = {"title": "Only a title"}

        serialized = serialize_payload(payload)

        assert serialized == payload
        assert serialized is not payload

    def test_none_stays_none(self):
        """No payload stays None."""
        assert serialize_payload(None) is None


class TestDescriptors:
    """Request and response descriptors."""

    def test_headers_default_to_empty(self):
        """Each descriptor gets its own empty header mapping."""
        first = RequestDescriptor("GET", "/books")
        second = RequestDescriptor("GET", "/books/1")

        assert first.headers == {}
        assert first.headers is not second.headers
        assert ResponseEnvelope(status=204, ok=True, body=None).headers == {}


class TestTransportSend:
    """Tests for Transport.send."""

    def test_success(self, mock_transport):
        """A 2xx response is ok with its body decoded."""
        transport = mock_transport(
            lambda request: httpx.Response(200, json={"success": True, "data": {"id": 1}})
        )

        envelope = transport.send(RequestDescriptor("GET", "/books/1"))

        assert envelope.status == 200
        assert envelope.ok is True
        assert envelope.body == {"success": True, "data": {"id": 1}}

    def test_error_status_is_returned_not_raised(self, mock_transport):
        """Error statuses are returned, not raised."""
        transport = mock_transport(
            lambda request: httpx.Response(404, json={"error": "Not Found", "message": "nope"})
        )

        envelope = transport.send(RequestDescriptor("GET", "/books/999"))

        assert envelope.status == 404
        assert envelope.ok is False
        assert envelope.body["error"] == "Not Found"

    def test_html_body_normalized_to_none(self, mock_transport):
        """A non-JSON body is None with the text kept."""
        transport = mock_transport(
            lambda request: httpx.Response(502, text="<html>Bad Gateway</html>")
        )

        envelope = transport.send(RequestDescriptor("GET", "/books"))

        assert envelope.status == 502
        assert envelope.body is None
        assert envelope.text == "<html>Bad Gateway</html>"

    def test_sends_json_and_bearer_token(self, mock_transport):
        """Method, path, token and JSON body reach the server."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, json={})

        transport = mock_transport(handler)

        transport.send(RequestDescriptor("post", "/books", json={"title": "X"}, token="tok"))

        request = seen[0]
        assert request.method == "POST"
        assert request.url.path == "/books"
        assert request.headers["Authorization"] == "Bearer tok"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {"title": "X"}

    def test_no_body_when_json_is_none(self, mock_transport):
        """No body and no Authorization when neither is given."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        transport = mock_transport(handler)

        transport.send(RequestDescriptor("DELETE", "/books/1"))

        assert seen[0].content == b""
        assert "Authorization" not in seen[0].headers

    def test_empty_object_body_is_sent(self, mock_transport):
        """An empty object is still sent as a body."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(400, json={})

        transport = mock_transport(handler)

        transport.send(RequestDescriptor("POST", "/auth/login", json={}))

        assert json.loads(seen[0].content) == {}

    def test_custom_headers(self, mock_transport):
        """Caller headers are sent."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        transport = mock_transport(handler)

        transport.send(RequestDescriptor("GET", "/books", headers={"X-Request-Id": "abc"}))

        assert seen[0].headers["X-Request-Id"] == "abc"


class TestTransportFailures:
    """Network failures raise TransportError, chained to the httpx error."""

    @pytest.mark.parametrize(
        "error_class",
        [httpx.ConnectError, httpx.ReadTimeout, httpx.ConnectTimeout],
    )
    def test_network_failure(self, mock_transport, error_class):
        """Network errors raise TransportError chained to httpx."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise error_class("boom", request=request)

        transport = mock_transport(handler)

        with pytest.raises(TransportError) as exc_info:
            transport.send(RequestDescriptor("GET", "/books"))

        error = exc_info.value
        assert isinstance(error.__cause__, error_class)
        assert error.method == "GET"
        assert error.url.endswith("/books")
        assert "boom" in str(error)


class TestTransportFromSettings:
    """Transport.from_settings applies base URL and timeout."""

    def test_base_url_and_timeout(self):
        """The client uses the configured base URL and timeout."""
        settings = Settings(base_url="http://library.example:3000/", request_timeout=2.5)

        with Transport.from_settings(settings) as transport:
            assert str(transport.client.base_url).rstrip("/") == "http://library.example:3000"
            assert transport.client.timeout.read == 2.5
            assert transport.client.timeout.connect == 2.5
