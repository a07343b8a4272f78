"""Shared HTTP client configuration."""

from collections.abc import Mapping

import httpx

from fluentrest._version import __version__

DEFAULT_TIMEOUT = 30.0
JSON_CONTENT_TYPE = "application/json"


def create_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT,
    base_url: str | None = None,
    headers: Mapping[str, str] | None = None,
) -> httpx.AsyncClient:
    """Create configured async HTTP client.

    Args:
        timeout: Request timeout in seconds.
        base_url: Optional base URL for all requests.
        headers: Optional default headers sent with every request.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    default_headers = {"User-Agent": f"fluentrest/{__version__}"}
    if headers:
        default_headers.update(headers)
    return httpx.AsyncClient(
        timeout=timeout,
        base_url=base_url or "",
        headers=default_headers,
    )


def has_error_status_code(status_code: int) -> bool:
    """Return True unless the status code is in the 2xx success range."""
    return not (status_code >= 200 and status_code < 300)
