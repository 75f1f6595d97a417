"""Structured responses: the escape hatch for handlers needing full control.

A handler that returns a ``Response`` skips templating and JSON encoding;
the serializer calls ``apply_to()`` and does nothing else.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace

from home.http.sink import ResponseSink


class Response(ABC):
    """Base for values that serialize themselves onto a ``ResponseSink``."""

    __slots__ = ()

    @abstractmethod
    async def apply_to(self, response: ResponseSink) -> None:
        """Write status, headers and body to *response* and end it."""


@dataclass(frozen=True, slots=True)
class TextResponse(Response):
    """A complete response with an in-memory body.

    Construct with a body, then chain ``.with_*()`` calls. Each call
    returns a new ``TextResponse``::

        return TextResponse("created").with_status(201)
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/plain; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    def with_status(self, status: int) -> TextResponse:
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> TextResponse:
        return replace(self, headers=(*self.headers, (name, value)))

    def with_content_type(self, content_type: str) -> TextResponse:
        return replace(self, content_type=content_type)

    @property
    def body_bytes(self) -> bytes:
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    async def apply_to(self, response: ResponseSink) -> None:
        body = self.body_bytes
        response.status = self.status
        response.set_header("Content-Type", self.content_type)
        for name, value in self.headers:
            response.set_header(name, value)
        response.set_header("Content-Length", str(len(body)))
        await response.end(body)


@dataclass(frozen=True, slots=True)
class Redirect(Response):
    """A redirect response."""

    url: str
    status: int = 302

    async def apply_to(self, response: ResponseSink) -> None:
        response.status = self.status
        response.set_header("Location", self.url)
        await response.end()
