"""Home: a tiny web framework for devices.

Routes are middleware tried in registration order. A handler returns
``NEXT`` to let the next route try, or a value to answer with: a
``Response``, data rendered into a view, or data sent as JSON.

Basic usage::

    from home import App

    app = App()
    app.use("/", App.static("static"))

    @app.get("/")
    def index(request, response):
        return {"sn": "X1", "time": 123}

    app.listen(80)
"""

__version__ = "0.1.0"
__all__ = [
    "NEXT",
    "App",
    "AppConfig",
    "BindError",
    "ConfigurationError",
    "ExpectedError",
    "HomeError",
    "Middleware",
    "NotFound",
    "Redirect",
    "Request",
    "Response",
    "ResponseSink",
    "StaticFiles",
    "TemplateCache",
    "TextResponse",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import home`` fast while providing a clean top-level API.
    """
    if name == "App":
        from home.app import App

        return App

    if name == "AppConfig":
        from home.config import AppConfig

        return AppConfig

    if name == "Request":
        from home.http.request import Request

        return Request

    if name == "ResponseSink":
        from home.http.sink import ResponseSink

        return ResponseSink

    if name in ("Response", "TextResponse", "Redirect"):
        from home.http import response as _resp

        return getattr(_resp, name)

    if name in ("NEXT", "Middleware"):
        from home.middleware import protocol as _mw

        return getattr(_mw, name)

    if name == "StaticFiles":
        from home.middleware.static import StaticFiles

        return StaticFiles

    if name == "TemplateCache":
        from home.templating.views import TemplateCache

        return TemplateCache

    if name in ("HomeError", "ConfigurationError", "BindError", "ExpectedError", "NotFound"):
        from home import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
