"""Response parser strategies.

A parser turns the raw response body into a typed value and hands it to the
caller's callback. Decoding and delivery are separate steps so the executor
can route decode failures to the error path without catching exceptions
raised by user callbacks.
"""

from collections.abc import Callable
from typing import Any

from fluentrest._internal.request.serialization import decode_value, get_type_adapter


class ResponseParser:
    """Base parser: decode a body, then deliver the decoded value."""

    def __init__(self, callback: Callable[[Any], Any], target: Any) -> None:
        self._callback = callback
        self._adapter = get_type_adapter(target)

    def parse(self, text: str) -> Any:
        """Decode the response body.

        Raises:
            DecodeError: If the body does not match the expected type.
        """
        return decode_value(text, self._adapter)

    def deliver(self, value: Any) -> None:
        self._callback(value)


class SingleResponseParser(ResponseParser):
    """Decode the whole body as one value of ``result_type``."""

    def __init__(self, callback: Callable[[Any], Any], result_type: Any) -> None:
        super().__init__(callback, result_type)


class SequenceResponseParser(ResponseParser):
    """Decode the whole body as an ordered list of ``item_type``."""

    def __init__(self, callback: Callable[[list[Any]], Any], item_type: Any) -> None:
        super().__init__(callback, list[item_type])  # type: ignore[valid-type]
