"""Request builder, execution and response dispatch."""

from fluentrest._internal.request.builder import RestRequest
from fluentrest._internal.request.context import AsyncioExecutionContext, ExecutionContext
from fluentrest._internal.request.executor import RestExecutor
from fluentrest._internal.request.models import (
    SUPPORTED_VERBS,
    Failure,
    HttpVerb,
    ObjectId,
    RequestOutcome,
    RequestSpec,
    Success,
)
from fluentrest._internal.request.parsers import (
    ResponseParser,
    SequenceResponseParser,
    SingleResponseParser,
)
from fluentrest._internal.request.url import compose_url

__all__ = [
    "RestRequest",
    "RestExecutor",
    "ExecutionContext",
    "AsyncioExecutionContext",
    "HttpVerb",
    "SUPPORTED_VERBS",
    "ObjectId",
    "RequestSpec",
    "RequestOutcome",
    "Success",
    "Failure",
    "ResponseParser",
    "SingleResponseParser",
    "SequenceResponseParser",
    "compose_url",
]
