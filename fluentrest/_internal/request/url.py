"""URL composition for REST requests."""

from typing import Any


def compose_url(
    base_url: str,
    endpoint: str,
    resource_id: Any = None,
    resource_path: str | None = None,
) -> str:
    """Assemble ``base_url/endpoint[/resource_id][/resource_path]``.

    Segments are joined as-is. Callers needing URL-encoding must pre-encode.

    Args:
        base_url: Scheme and host, optionally with a path prefix.
        endpoint: Collection name (e.g. "things").
        resource_id: Optional identifier, rendered with ``str()``.
        resource_path: Optional trailing segment, always rendered last.

    Returns:
        The composed URL.
    """
    url = f"{base_url}/{endpoint}"
    if resource_id is not None:
        url = f"{url}/{resource_id}"
    if resource_path is not None:
        url = f"{url}/{resource_path}"
    return url
