"""JSON encoding and typed decoding backed by pydantic."""

from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError
from pydantic_core import PydanticSerializationError, to_json

from fluentrest.exceptions import ConfigurationError, DecodeError


def encode_value(value: Any) -> str:
    """Encode a value (model, dataclass, dict, list, scalar) as compact JSON text.

    Raises:
        ConfigurationError: If the value cannot be serialized.
    """
    try:
        return to_json(value).decode("utf-8")
    except PydanticSerializationError as e:
        raise ConfigurationError(f"Cannot encode request body: {e}") from e


@lru_cache(maxsize=256)
def get_type_adapter(target: Any) -> TypeAdapter:
    """Get a cached TypeAdapter for ``target``.

    Raises:
        ConfigurationError: If pydantic cannot build a schema for the type.
    """
    try:
        return TypeAdapter(target)
    except PydanticSchemaGenerationError as e:
        raise ConfigurationError(f"Unsupported result type {target!r}: {e}") from e


def decode_value(text: str, adapter: TypeAdapter) -> Any:
    """Decode JSON text through ``adapter``.

    Raises:
        DecodeError: If the text is not valid JSON or does not match the type.
    """
    try:
        return adapter.validate_json(text)
    except ValidationError as e:
        raise DecodeError(f"Failed to decode response body: {e}", body=text) from e
