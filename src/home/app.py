"""Home application class.

Mutable during setup (route registration). Frozen once it starts serving,
when ``listen()`` or ``__call__()`` is first invoked.
"""

import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeAlias

from home._internal.asgi import Receive, Scope, Send
from home.config import AppConfig
from home.middleware.protocol import Middleware
from home.middleware.static import StaticFiles
from home.routing.router import RouteTable
from home.server.handler import handle_request
from home.templating.views import TemplateCache

_Decorator: TypeAlias = Callable[[Middleware], Middleware]


class App:
    """The home application.

    Routes are tried in registration order::

        app = App()
        app.use("/", App.static("static"))

        @app.get("/")
        def index(request, response):
            return {"sn": device.sn, "time": time.time()}

        app.listen(80)

    Thread safety:
        Registration happens on one thread before serving. The freeze
        transition uses a Lock + double-check so that concurrent first
        requests on several pounce workers freeze the app exactly once.
    """

    __slots__ = ("_freeze_lock", "_frozen", "_routes", "_views", "config")

    static = staticmethod(StaticFiles)

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._routes = RouteTable()
        self._views = TemplateCache(self.config.views, autoescape=self.config.autoescape)
        self._frozen = False
        self._freeze_lock = threading.Lock()

    # -- Routes --

    @property
    def routes(self) -> RouteTable:
        return self._routes

    @property
    def views(self) -> TemplateCache:
        return self._views

    @property
    def views_dir(self) -> Path:
        return self._views.directory

    @property
    def error_views_folder(self) -> str:
        return self.config.error_views_folder.strip("/")

    def add(
        self,
        path: str,
        handler: Middleware | None = None,
        *,
        method: str | None = None,
        prefix_match: bool = False,
    ) -> Any:
        """Register *handler* for *path*; the general form of use/get/post.

        Without *handler*, returns a decorator::

            @app.add("/api", method="POST", prefix_match=True)
            def api(request, response): ...
        """
        if handler is None:
            return self._decorator(path, method=method, prefix_match=prefix_match)
        self._check_not_frozen()
        self._routes.register(method, path, handler, prefix_match=prefix_match)
        return handler

    def use(self, path: str, handler: Middleware | None = None) -> Any:
        """Mount *handler* at *path* for every method, matching sub-paths too.

        ``use("/foo", h)`` and ``use("/foo/", h)`` both match ``/foo`` and
        ``/foo/bar``. ``use("/", h)`` matches every request.
        """
        return self.add(path, handler, prefix_match=True)

    def get(self, path: str, handler: Middleware | None = None) -> Any:
        """Register *handler* for GET requests to exactly *path*."""
        return self.add(path, handler, method="GET")

    def post(self, path: str, handler: Middleware | None = None) -> Any:
        """Register *handler* for POST requests to exactly *path*."""
        return self.add(path, handler, method="POST")

    def _decorator(self, path: str, *, method: str | None, prefix_match: bool) -> _Decorator:
        def decorator(handler: Middleware) -> Middleware:
            self.add(path, handler, method=method, prefix_match=prefix_match)
            return handler

        return decorator

    # -- Server --

    def listen(self, port: int | None = None, host: str | None = None) -> None:
        """Bind and serve requests until the server shuts down.

        Raises ``BindError`` if the address cannot be bound.

        Args:
            port: Override ``config.port``.
            host: Override ``config.host``.
        """
        from home.server.listen import serve

        self._ensure_frozen()
        serve(
            self,
            host or self.config.host,
            port if port is not None else self.config.port,
            workers=self.config.workers,
            log_level=self.config.log_level,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()

        await handle_request(
            scope,
            receive,
            send,
            routes=self._routes,
            views=self._views,
            error_views_folder=self.error_views_folder,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Acknowledge lifespan startup and shutdown."""
        self._ensure_frozen()

        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._routes.compile()
            self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes before calling app.listen()."
            )
            raise RuntimeError(msg)

    @property
    def frozen(self) -> bool:
        return self._frozen

