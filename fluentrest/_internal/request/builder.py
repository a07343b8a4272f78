"""Fluent request builder."""

import asyncio
from collections.abc import Callable, Mapping
from typing import Any

from fluentrest._internal.request.context import ExecutionContext
from fluentrest._internal.request.executor import RestExecutor
from fluentrest._internal.request.models import (
    SUPPORTED_VERBS,
    HttpVerb,
    RequestOutcome,
    RequestSpec,
)
from fluentrest._internal.request.parsers import (
    ResponseParser,
    SequenceResponseParser,
    SingleResponseParser,
)
from fluentrest._internal.request.serialization import encode_value
from fluentrest.exceptions import ConfigurationError


class RestRequest:
    """Fluent builder for a single REST request.

    Every ``with_*``/``on_*`` method overwrites its field and returns this same
    builder, so calls chain in any order and the last call for a field wins.
    ``send()`` freezes the configuration into a ``RequestSpec`` and schedules
    it on the execution context; later changes to the builder do not affect a
    request already sent.

    A builder describes one request. Sending it twice, or configuring it from
    several tasks at once, is not supported.

    Example:
        RestRequest(HttpVerb.GET, "https://api.example.com", "things", context) \\
            .with_id(42) \\
            .on_result(show_thing, Thing) \\
            .on_error(print) \\
            .send()
    """

    def __init__(
        self,
        verb: HttpVerb | str,
        base_url: str,
        endpoint: str,
        context: ExecutionContext,
        *,
        executor: RestExecutor | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            verb: HTTP method. Only GET and POST are supported.
            base_url: Scheme and host, e.g. "https://api.example.com".
            endpoint: Collection name appended to the base URL.
            context: Execution context that runs the request asynchronously.
            executor: Executor to send through. Defaults to one using a
                one-shot HTTP client per request.

        Raises:
            ConfigurationError: If the verb is unknown or unsupported.
        """
        try:
            verb = HttpVerb(verb.upper() if isinstance(verb, str) else verb)
        except ValueError as e:
            raise ConfigurationError(f"Unknown HTTP verb: {verb!r}") from e
        if verb not in SUPPORTED_VERBS:
            raise ConfigurationError(f"Unsupported HTTP verb: {verb.value}")

        self._verb = verb
        self._base_url = base_url
        self._endpoint = endpoint
        self._context = context
        self._executor = executor or RestExecutor()

        self._resource_id: Any = None
        self._resource_path: str | None = None
        self._body: str | None = None
        self._headers: Mapping[str, Any] | None = None
        self._parser: ResponseParser | None = None
        self._on_result: Callable[[], Any] | None = None
        self._on_error: Callable[[str], Any] | None = None

    @property
    def verb(self) -> HttpVerb:
        return self._verb

    def with_body(self, body: Any) -> "RestRequest":
        """Set the request payload.

        A ``str`` is sent as-is. Any other value (pydantic model, dataclass,
        dict, list) is encoded to JSON text first.

        Raises:
            ConfigurationError: If the value cannot be encoded.
        """
        self._body = body if isinstance(body, str) else encode_value(body)
        return self

    def with_id(self, resource_id: Any) -> "RestRequest":
        """Set the resource identifier rendered after the endpoint."""
        self._resource_id = resource_id
        return self

    def with_resource(self, resource_path: str) -> "RestRequest":
        """Set the trailing path segment."""
        self._resource_path = resource_path
        return self

    def with_headers(self, headers: Mapping[str, Any]) -> "RestRequest":
        """Replace the header mapping."""
        self._headers = headers
        return self

    def on_error(self, callback: Callable[[str], Any]) -> "RestRequest":
        """Set the callback receiving the diagnostic message on failure."""
        self._on_error = callback
        return self

    def on_result(
        self,
        callback: Callable[..., Any],
        result_type: Any = None,
        *,
        many: bool = False,
    ) -> "RestRequest":
        """Set the success callback.

        Args:
            callback: Called on success.
            result_type: When given, the body is decoded as this type and
                passed to ``callback``. When omitted, ``callback`` takes no
                arguments and the body is ignored.
            many: Decode the body as a list of ``result_type``.

        A typed callback always takes precedence over a no-argument one when
        both have been configured.

        Raises:
            ConfigurationError: If ``result_type`` cannot be decoded into, or
                ``many`` is set without a ``result_type``.
        """
        if result_type is None:
            if many:
                raise ConfigurationError("many=True requires a result_type")
            self._on_result = callback
        elif many:
            self._parser = SequenceResponseParser(callback, result_type)
        else:
            self._parser = SingleResponseParser(callback, result_type)
        return self

    def build(self) -> RequestSpec:
        """Freeze the current configuration into a request snapshot."""
        return RequestSpec(
            verb=self._verb,
            base_url=self._base_url,
            endpoint=self._endpoint,
            resource_id=self._resource_id,
            resource_path=self._resource_path,
            body=self._body,
            headers=dict(self._headers) if self._headers is not None else None,
            parser=self._parser,
            on_result=self._on_result,
            on_error=self._on_error,
        )

    def send(self) -> "asyncio.Future[RequestOutcome]":
        """Schedule the request on the execution context.

        Failures are reported through the callbacks (or logged); the returned
        future resolves to the outcome and can be awaited or ignored.
        """
        return self._context.start(self._executor.execute(self.build()))

    async def execute(self) -> RequestOutcome:
        """Send the request on the current task and return its outcome."""
        return await self._executor.execute(self.build())
