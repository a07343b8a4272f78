"""Verb dispatch and payload encoding for transport requests."""

from collections.abc import Callable, Mapping
from typing import Any

import httpx

from fluentrest._internal.http import JSON_CONTENT_TYPE
from fluentrest._internal.request.models import HttpVerb
from fluentrest.exceptions import ConfigurationError


def build_get_request(client: httpx.AsyncClient, url: str, body: str | None) -> httpx.Request:
    """Build a bodyless GET request. ``body`` is ignored."""
    return client.build_request("GET", url)


def build_post_request(client: httpx.AsyncClient, url: str, body: str | None) -> httpx.Request:
    """Build a POST request carrying ``body`` as UTF-8 JSON."""
    data = (body or "").encode("utf-8")
    return client.build_request(
        "POST",
        url,
        content=data,
        headers={"Content-Type": JSON_CONTENT_TYPE},
    )


_BUILDERS: dict[HttpVerb, Callable[[httpx.AsyncClient, str, str | None], httpx.Request]] = {
    HttpVerb.GET: build_get_request,
    HttpVerb.POST: build_post_request,
}


def build_transport_request(
    client: httpx.AsyncClient,
    verb: HttpVerb,
    url: str,
    body: str | None = None,
) -> httpx.Request:
    """Build the transport request for ``verb``.

    Raises:
        ConfigurationError: If no construction path exists for the verb.
    """
    builder = _BUILDERS.get(verb)
    if builder is None:
        raise ConfigurationError(f"Unsupported HTTP verb: {verb}")
    return builder(client, url, body)


def apply_headers(request: httpx.Request, headers: Mapping[str, Any]) -> None:
    """Set each header on the request, stringifying values."""
    for name, value in headers.items():
        request.headers[name] = str(value)
