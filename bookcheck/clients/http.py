"""
HTTP Transport and Response Normalizer

The transport sends exactly one request per call and reports what came back:

1. Build headers (JSON content type, optional bearer token, caller overrides)
2. Send through an httpx.Client bound to the base URL
3. Normalize the body: JSON when it parses, None when it doesn't

Non-2xx responses are returned like any other response. Only failures that
produce no response at all (connection refused, DNS, timeout) raise, as
bookcheck.exceptions.TransportError.

Usage:
    from bookcheck.clients.http import RequestDescriptor, Transport

    transport = Transport.from_settings(settings)
    envelope = transport.send(RequestDescriptor("GET", "/books/1"))
    envelope.status, envelope.body
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Union

import httpx
from pydantic import BaseModel

from bookcheck.config import Settings
from bookcheck.exceptions import TransportError

logger = logging.getLogger(__name__)

JSONValue = Union[None, bool, int, float, str, list["JSONValue"], dict[str, "JSONValue"]]


def _reject_constant(name: str) -> None:
    raise ValueError(f"{name} is not valid JSON")


def build_headers(
    token: str | None = None,
    content_type: str | None = "application/json",
    extra: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """
    Build request headers.

    Content-Type is set by default and Authorization when a token is given.
    Headers in `extra` win over both.
    """
    headers: dict[str, str] = {}
    if content_type:
        headers["Content-Type"] = content_type
    if token:
        headers["Authorization"] = f"Bearer {token}"
    if extra:
        headers.update(extra)
    return headers


def serialize_payload(payload: Any) -> Any:
    """
    Turn a request payload into something httpx can send as JSON.

    Pydantic models are dumped by alias with unset fields left out, so a
    BookUpdate(available=False) sends only {"available": false}. Mappings are
    copied as they are, which lets scenarios send deliberately broken bodies.
    """
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True, exclude_unset=True)
    if isinstance(payload, Mapping):
        return dict(payload)
    return payload


def parse_body(raw: bytes | str | None) -> JSONValue:
    """
    Parse a response body as JSON.

    Empty bodies, HTML error pages, truncated streams and undecodable bytes
    all come back as None. So do bodies using NaN or Infinity and bodies
    nested too deeply to decode. This never raises.

    Args:
        raw: Response body as bytes or text

    Returns:
        The decoded JSON value, or None
    """
    if not raw:
        return None
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        return None


@dataclass(frozen=True)
class RequestDescriptor:
    """
    Everything needed for one HTTP call.

    `json` is the request body; None means no body is sent.
    """

    method: str
    path: str
    json: Any = None
    token: str | None = None
    headers: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ResponseEnvelope:
    """What the server sent back, with the body already normalized."""

    status: int
    ok: bool
    body: JSONValue
    text: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)


class Transport:
    """
    Sends RequestDescriptors through an httpx.Client.

    The client carries the base URL and timeout policy. Any httpx.Client
    works, including fastapi.testclient.TestClient for an in-process app and
    clients built on httpx.MockTransport.
    """

    def __init__(self, client: httpx.Client):
        self.client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "Transport":
        """Create a transport for the server at settings.base_url."""
        client = httpx.Client(
            base_url=settings.base_url,
            timeout=settings.request_timeout,
        )
        return cls(client)

    def send(self, descriptor: RequestDescriptor) -> ResponseEnvelope:
        """
        Send one request and return the normalized response.

        Raises:
            TransportError: If no HTTP response was received
        """
        method = descriptor.method.upper()
        headers = build_headers(descriptor.token, extra=descriptor.headers)

        request_kwargs: dict[str, Any] = {"headers": headers}
        if descriptor.json is not None:
            request_kwargs["json"] = descriptor.json

        try:
            response = self.client.request(method, descriptor.path, **request_kwargs)
        except httpx.TransportError as exc:
            url = str(self.client.base_url).rstrip("/") + descriptor.path
            logger.error(f"{method} {url} failed: {exc!r}")
            raise TransportError(method, url, str(exc) or type(exc).__name__) from exc

        logger.debug(f"{method} {descriptor.path} -> {response.status_code}")

        return ResponseEnvelope(
            status=response.status_code,
            ok=response.is_success,
            body=parse_body(response.content),
            text=response.text,
            headers=MappingProxyType(dict(response.headers)),
        )

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
