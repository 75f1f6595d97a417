"""ASGI handler: runs one request through the route table.

The only component that drives the dispatch loop. Converts the ASGI scope
to a ``Request``, invokes each matching middleware in registration order
until one returns something other than ``NEXT``, and hands the result to
the serializer or the failure to the error path.
"""

import inspect
import logging
from typing import Any

from home._internal.asgi import Receive, Scope, Send
from home.errors import NotFound
from home.http.request import Request
from home.http.sink import ResponseSink
from home.middleware.protocol import NEXT, Outcome
from home.routing.route import Route
from home.routing.router import RouteTable
from home.server.errors import send_error
from home.server.serializer import send_result
from home.templating.views import TemplateCache

logger = logging.getLogger("home.server")


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    routes: RouteTable,
    views: TemplateCache,
    error_views_folder: str,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)
    response = ResponseSink(send)

    try:
        result = await _dispatch(request, response, routes)
        if response.headers_sent:
            # The handler wrote the response itself.
            await response.end()
        else:
            await send_result(result, response, path=request.url_path, views=views)
    except Exception as exc:
        try:
            await send_error(
                exc, request, response, views=views, error_views_folder=error_views_folder
            )
        except Exception:
            logger.exception(
                "Failed to send error response for %s %s", request.method, request.url_path
            )


async def _dispatch(request: Request, response: ResponseSink, routes: RouteTable) -> Any:
    """Invoke matching routes until one produces a terminal value.

    Raises ``NotFound`` when every match declined or nothing matched.
    """
    for route in routes.iter_matches(request.method, request.url_path):
        outcome = await invoke(route, request, response)
        if outcome is not NEXT:
            return outcome
    raise NotFound(request.url_path)


async def invoke(route: Route, request: Request, response: ResponseSink) -> Outcome:
    """Call *route*'s handler and await the result if it's awaitable.

    Sync handlers return their value directly, async ones a coroutine;
    both come out of here the same way.
    """
    result = route.handler(request.mounted(route), response)
    if inspect.isawaitable(result):
        result = await result
    return result
