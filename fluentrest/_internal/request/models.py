"""Pydantic models for REST requests and their outcomes."""

from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from fluentrest._internal.request.parsers import ResponseParser
from fluentrest.exceptions import FluentRestError

# =============================================================================
# Verbs
# =============================================================================


class HttpVerb(str, Enum):
    """HTTP methods known to the builder."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


SUPPORTED_VERBS: frozenset[HttpVerb] = frozenset({HttpVerb.GET, HttpVerb.POST})

# =============================================================================
# Identifiers
# =============================================================================


class ObjectId(BaseModel):
    """Opaque resource identifier rendered as a URL path segment."""

    value: str

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Request Snapshot
# =============================================================================


class RequestSpec(BaseModel):
    """Immutable snapshot of a configured request.

    Required fields:
        verb: The HTTP method
        base_url: Scheme and host (not validated)
        endpoint: Collection name appended to base_url

    Optional fields:
        resource_id: Identifier rendered after the endpoint
        resource_path: Trailing path segment, always last
        body: Raw text payload for body-carrying verbs
        headers: Header mapping, values are stringified on send
        parser: Typed response parser, takes precedence over on_result
        on_result: No-argument success callback
        on_error: Callback receiving the diagnostic message on failure
    """

    verb: HttpVerb
    base_url: str
    endpoint: str

    resource_id: Any = None
    resource_path: str | None = None
    body: str | None = None
    headers: dict[str, Any] | None = None
    parser: ResponseParser | None = None
    on_result: Callable[[], Any] | None = None
    on_error: Callable[[str], Any] | None = None

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


# =============================================================================
# Outcomes
# =============================================================================


class Success(BaseModel):
    """Request succeeded. ``value`` is the decoded body, or None without a parser."""

    value: Any = None

    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return True


class Failure(BaseModel):
    """Request failed with a transport, status or decode error."""

    error: FluentRestError

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return str(self.error)


RequestOutcome = Success | Failure
