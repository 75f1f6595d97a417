"""Result serialization: turns a handler's terminal value into a response.

Order of preference:

1. A ``Response`` object serializes itself.
2. A view named after the request path renders the value as HTML.
3. Anything else is JSON; ``None`` means an empty body.
"""

import json
from typing import Any

from home.http.response import Response
from home.http.sink import ResponseSink
from home.templating.views import TemplateCache, to_tree


def encode_json(value: Any) -> str | None:
    """Compact JSON for *value*, or None when there is nothing to send."""
    if value is None:
        return None
    return json.dumps(to_tree(value), separators=(",", ":"), default=_default)


def _default(value: Any) -> Any:
    tree = to_tree(value)
    if tree is value:
        msg = f"Object of type {type(value).__name__} is not JSON serializable"
        raise TypeError(msg)
    return tree


async def send_result(
    result: Any,
    response: ResponseSink,
    *,
    path: str,
    views: TemplateCache,
) -> None:
    """Serialize *result* for a request to *path* and end *response*."""
    if isinstance(result, Response):
        await result.apply_to(response)
        return

    html = await views.render(views.view_name(path), result)
    if html is not None:
        response.set_header("Content-Type", "text/html")
        await response.end(html)
        return

    body = encode_json(result)
    if body:
        response.set_header("Content-Type", "application/json")
        await response.end(body)
    else:
        await response.end()
