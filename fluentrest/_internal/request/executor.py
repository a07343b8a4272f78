"""Executor that sends a request snapshot and dispatches its outcome."""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager

import httpx

from fluentrest._internal.http import DEFAULT_TIMEOUT, create_http_client, has_error_status_code
from fluentrest._internal.request.models import Failure, RequestOutcome, RequestSpec, Success
from fluentrest._internal.request.payload import apply_headers, build_transport_request
from fluentrest._internal.request.url import compose_url
from fluentrest.exceptions import DecodeError, FluentRestError, StatusError, TransportError

logger = logging.getLogger(__name__)


class RestExecutor:
    """Send request snapshots over httpx and route each outcome exactly once.

    Transport, status and decode failures never escape ``execute``: they are
    handed to the request's error callback, or logged at WARNING level when
    no callback is configured, and returned as a ``Failure``.

    When no ``http_client`` is injected, a one-shot client is opened for each
    request and closed once the response body has been read.
    """

    def __init__(
        self,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        is_error_status: Callable[[int], bool] = has_error_status_code,
    ) -> None:
        """Initialize the executor.

        Args:
            http_client: Shared client to send through. Not closed by the executor.
            timeout: Timeout in seconds for one-shot clients.
            is_error_status: Classifier deciding which status codes are failures.
        """
        self._http_client = http_client
        self._timeout = timeout
        self._is_error_status = is_error_status

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._http_client is not None:
            yield self._http_client
            return
        async with create_http_client(timeout=self._timeout) as client:
            yield client

    async def execute(self, spec: RequestSpec) -> RequestOutcome:
        """Send the request described by ``spec`` and dispatch the outcome.

        Returns:
            Success with the decoded value (None without a parser), or Failure.
        """
        url = compose_url(spec.base_url, spec.endpoint, spec.resource_id, spec.resource_path)

        async with self._client() as client:
            try:
                request = build_transport_request(client, spec.verb, url, spec.body)
                if spec.headers is not None:
                    apply_headers(request, spec.headers)
                logger.debug("Sending %s %s", request.method, request.url)
                response = await client.send(request)
            except (httpx.RequestError, httpx.InvalidURL) as e:
                return self._fail(spec, TransportError(str(e) or type(e).__name__))

        logger.debug("Received %s from %s %s", response.status_code, spec.verb.value, url)
        if self._is_error_status(response.status_code):
            return self._fail(spec, StatusError(response.status_code))

        if spec.parser is not None:
            try:
                value = spec.parser.parse(response.text)
            except DecodeError as e:
                return self._fail(spec, e)
            spec.parser.deliver(value)
            return Success(value=value)

        if spec.on_result is not None:
            spec.on_result()
        return Success()

    def _fail(self, spec: RequestSpec, error: FluentRestError) -> Failure:
        message = str(error)
        if spec.on_error is not None:
            spec.on_error(message)
        else:
            logger.warning("There was an error and no error handler was specified: %s", message)
        return Failure(error=error)
