"""fluentrest: fluent REST request builder for asyncio.

Public API:
    RestClient - Builder factory bound to a base URL and shared HTTP client
    RestRequest - Fluent builder for one request
    HttpVerb, ObjectId - Request configuration values
    Success, Failure - Request outcomes

Internal (not for direct use):
    _internal.request - Builder, executor and response parsers
    _internal.http - HTTP client configuration
"""

from fluentrest._internal.request import (
    AsyncioExecutionContext,
    ExecutionContext,
    RestExecutor,
    RestRequest,
)
from fluentrest._version import __version__
from fluentrest.client import RestClient, get_rest_client
from fluentrest.exceptions import (
    ConfigurationError,
    DecodeError,
    FluentRestError,
    StatusError,
    TransportError,
)
from fluentrest.models import Failure, HttpVerb, ObjectId, RequestOutcome, RequestSpec, Success

__all__ = [
    "__version__",
    "RestClient",
    "get_rest_client",
    "RestRequest",
    "RestExecutor",
    "ExecutionContext",
    "AsyncioExecutionContext",
    "HttpVerb",
    "ObjectId",
    "RequestSpec",
    "RequestOutcome",
    "Success",
    "Failure",
    "FluentRestError",
    "ConfigurationError",
    "TransportError",
    "StatusError",
    "DecodeError",
]
