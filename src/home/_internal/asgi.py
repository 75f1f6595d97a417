"""ASGI type aliases and message builders.

Users never see these; ``Request`` and ``ResponseSink`` wrap them.
"""

from collections.abc import Awaitable, Callable, Iterable, MutableMapping
from typing import Any, TypeAlias

# Raw ASGI types
Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]


def start_message(status: int, headers: Iterable[tuple[str, str]]) -> dict[str, Any]:
    """Build an ``http.response.start`` message from str header pairs."""
    return {
        "type": "http.response.start",
        "status": status,
        "headers": [
            (name.lower().encode("latin-1"), value.encode("latin-1")) for name, value in headers
        ],
    }


def body_message(body: bytes, *, more_body: bool) -> dict[str, Any]:
    """Build an ``http.response.body`` message."""
    return {"type": "http.response.body", "body": body, "more_body": more_body}
