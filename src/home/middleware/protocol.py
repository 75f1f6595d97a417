"""Middleware protocol and the ``NEXT`` pass-through marker.

A middleware is any callable matching::

    def handler(request: Request, response: ResponseSink) -> Outcome: ...
    async def handler(request: Request, response: ResponseSink) -> Outcome: ...

No base class required. Returning ``NEXT`` declines the request and the
dispatcher tries the next matching route. Anything else ends dispatch.
"""

from __future__ import annotations

from collections.abc import Awaitable
from typing import TYPE_CHECKING, Any, Final, Protocol, TypeAlias

if TYPE_CHECKING:
    from home.http.request import Request
    from home.http.sink import ResponseSink


class NextType:
    """Type of the ``NEXT`` marker. There is exactly one instance."""

    __slots__ = ()
    _instance: NextType | None = None

    def __new__(cls) -> NextType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NEXT"

    def __reduce__(self) -> str:
        return "NEXT"


NEXT: Final = NextType()

# What a middleware produces: NEXT, a Response, plain data, or None
Outcome: TypeAlias = Any


class Middleware(Protocol):
    """Protocol for home middleware.

    Accepts both functions and callable objects::

        # Function middleware
        def status(request: Request, response: ResponseSink) -> dict:
            return {"uptime": uptime()}

        # Class middleware
        class ApiKey:
            def __call__(self, request: Request, response: ResponseSink) -> Outcome:
                if request.headers.get("x-api-key") != self.key:
                    raise ExpectedError("Forbidden", 403)
                return NEXT
    """

    def __call__(self, request: Request, response: ResponseSink) -> Outcome | Awaitable[Outcome]: ...
