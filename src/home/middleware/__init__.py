"""Middleware: Protocol-based, no inheritance required.

A middleware is any callable matching:
    def mw(request: Request, response: ResponseSink) -> Outcome

Built-in middleware:
    StaticFiles -- Serve static files, preferring pre-gzipped variants
"""

from home.middleware.protocol import NEXT, Middleware, NextType, Outcome
from home.middleware.static import StaticFiles

__all__ = [
    "NEXT",
    "Middleware",
    "NextType",
    "Outcome",
    "StaticFiles",
]
