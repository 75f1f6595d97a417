"""Error responses for failed or unmatched requests.

Every failure the dispatcher catches ends up here. Expected errors keep
their status code and message; anything else is a 500 whose body never
includes the exception text.
"""

import logging

from home.errors import ExpectedError
from home.http.request import Request
from home.http.sink import ResponseSink
from home.templating.views import TemplateCache

logger = logging.getLogger("home.server")

SERVER_ERROR_MESSAGE = "Server Error"


def _log_error(exc: BaseException, request: Request) -> None:
    if isinstance(exc, ExpectedError):
        logger.info(
            "%d %s %s: %s", exc.status_code, request.method, request.url_path, exc.message
        )
    else:
        logger.error("500 %s %s", request.method, request.url_path, exc_info=exc)


async def send_error(
    exc: BaseException,
    request: Request,
    response: ResponseSink,
    *,
    views: TemplateCache,
    error_views_folder: str,
) -> None:
    """Log *exc* and answer with an error page, unless headers already went out.

    The error page is the view ``<error_views_folder>/<status>`` rendered
    with the error's data, or the plain message when no such view exists.
    """
    _log_error(exc, request)

    if response.headers_sent:
        # Too late to change status or body; just close what was started.
        await response.end()
        return

    if isinstance(exc, ExpectedError):
        status = exc.status_code
        message = exc.message
        data = exc.to_dict()
    else:
        status = 500
        message = SERVER_ERROR_MESSAGE
        data = {"message": message, "status_code": status}

    view = f"{error_views_folder}/{status}" if error_views_folder else str(status)
    try:
        body = await views.render(view, data)
    except Exception:
        logger.exception("Failed to render error view %r", view)
        body = None

    response.status = status
    response.set_header("Content-Type", "text/html")
    await response.end(body if body is not None else message)
