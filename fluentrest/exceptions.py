"""Public exceptions for fluentrest."""


class FluentRestError(Exception):
    """Base exception for all fluentrest errors."""


class ConfigurationError(FluentRestError):
    """Invalid request configuration (unsupported verb, unencodable body, missing env vars)."""


class TransportError(FluentRestError):
    """Low-level transport failure reported by the HTTP client."""


class StatusError(FluentRestError):
    """Transport succeeded but the response carried an error status code."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Has error status code: {status_code}")
        self.status_code = status_code


class DecodeError(FluentRestError):
    """Response body does not match the type expected by the configured parser."""

    def __init__(self, message: str, body: str | None = None) -> None:
        super().__init__(message)
        self.body = body
