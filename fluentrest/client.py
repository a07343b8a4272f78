"""User-facing REST client.

Example usage:
    from fluentrest import RestClient

    async with RestClient("https://api.example.com") as client:
        await client.get("things").with_id(42).on_result(show, Thing).send()

        client.post("things") \\
            .with_body(Thing(name="lamp")) \\
            .on_result(created) \\
            .on_error(report) \\
            .send()
"""

import logging
import os
from types import TracebackType

import httpx

from fluentrest._internal.http import DEFAULT_TIMEOUT, create_http_client
from fluentrest._internal.request import (
    AsyncioExecutionContext,
    ExecutionContext,
    HttpVerb,
    RestExecutor,
    RestRequest,
)
from fluentrest.exceptions import ConfigurationError

DEFAULT_TIMEOUT_MS = int(DEFAULT_TIMEOUT * 1000)


class RestClient:
    """Factory for request builders sharing one base URL, HTTP client and context.

    Use `RestClient.from_env()` to create a client from environment variables.
    """

    def __init__(
        self,
        base_url: str,
        *,
        headers: dict[str, str] | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        context: ExecutionContext | None = None,
        http_client: httpx.AsyncClient | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Base URL prepended to every endpoint.
            headers: Default headers sent with every request.
            timeout: Request timeout in seconds.
            context: Execution context for ``send()``. Defaults to the running
                asyncio loop.
            http_client: HTTP client to share. When given, the caller owns it
                and ``aclose()`` leaves it open.
            debug: Enable DEBUG logging for the ``fluentrest`` logger.

        Raises:
            ConfigurationError: If both ``headers`` and ``http_client`` are
                given. Set default headers on the shared client instead.
        """
        if http_client is not None and headers:
            raise ConfigurationError("headers cannot be combined with an injected http_client")

        self._base_url = base_url
        self._context = context or AsyncioExecutionContext()
        self._owns_http_client = http_client is None
        self._http_client = http_client or create_http_client(timeout=timeout, headers=headers)
        self._executor = RestExecutor(http_client=self._http_client, timeout=timeout)
        self._debug = debug
        if debug:
            logging.getLogger("fluentrest").setLevel(logging.DEBUG)

    @classmethod
    def from_env(cls) -> "RestClient":
        """Create a client from environment variables.

        Required environment variables:
            FLUENTREST_BASE_URL: Base URL for all requests.

        Optional environment variables:
            FLUENTREST_TIMEOUT_MS: Request timeout in milliseconds.
            FLUENTREST_DEBUG: Set to "1" to enable debug logging.

        Raises:
            ConfigurationError: If FLUENTREST_BASE_URL is not set.
            ValueError: If FLUENTREST_TIMEOUT_MS is not an integer.
        """
        base_url = os.environ.get("FLUENTREST_BASE_URL")
        if not base_url:
            raise ConfigurationError("FLUENTREST_BASE_URL is not set")

        debug = os.environ.get("FLUENTREST_DEBUG", "") == "1"
        timeout_ms = int(os.environ.get("FLUENTREST_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))

        return cls(base_url, timeout=timeout_ms / 1000, debug=debug)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def debug(self) -> bool:
        return self._debug

    @property
    def context(self) -> ExecutionContext:
        return self._context

    def request(self, verb: HttpVerb | str, endpoint: str) -> RestRequest:
        """Start building a request for ``endpoint``.

        Raises:
            ConfigurationError: If the verb is unsupported.
        """
        return RestRequest(
            verb,
            self._base_url,
            endpoint,
            self._context,
            executor=self._executor,
        )

    def get(self, endpoint: str) -> RestRequest:
        return self.request(HttpVerb.GET, endpoint)

    def post(self, endpoint: str) -> RestRequest:
        return self.request(HttpVerb.POST, endpoint)

    async def aclose(self) -> None:
        """Close the HTTP client if this client created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "RestClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


def get_rest_client() -> RestClient:
    """Get a REST client configured from environment variables.

    Returns:
        A configured RestClient instance.
    """
    return RestClient.from_env()
