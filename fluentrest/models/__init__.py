"""Public models for fluentrest requests and their outcomes."""

from fluentrest._internal.request.models import (
    SUPPORTED_VERBS,
    Failure,
    HttpVerb,
    ObjectId,
    RequestOutcome,
    RequestSpec,
    Success,
)

__all__ = [
    "HttpVerb",
    "SUPPORTED_VERBS",
    "ObjectId",
    "RequestSpec",
    "RequestOutcome",
    "Success",
    "Failure",
]
