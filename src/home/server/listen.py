"""Serve an app with pounce.

Pounce takes an import string or a live ASGI callable; home passes the
live ``App``. The bind address is checked up front so a busy port fails
with ``BindError`` before any worker starts.
"""

from __future__ import annotations

import logging
import socket
from typing import TYPE_CHECKING

from home.errors import BindError, ConfigurationError

if TYPE_CHECKING:
    from home.app import App

logger = logging.getLogger("home.server")


def check_bind(host: str, port: int) -> None:
    """Raise ``BindError`` if *host*:*port* cannot be bound right now."""
    try:
        probe = socket.create_server((host, port))
    except OSError as exc:
        msg = f"Cannot bind {host}:{port}: {exc.strerror or exc}"
        raise BindError(msg) from exc
    probe.close()


def serve(
    app: App,
    host: str,
    port: int,
    *,
    workers: int = 1,
    log_level: str = "info",
) -> None:
    """Bind *host*:*port* and serve *app* until the server shuts down."""
    try:
        from pounce.config import ServerConfig
        from pounce.server import Server
    except ImportError as exc:
        msg = (
            "pounce is required to serve requests. "
            "Install it with: pip install home[server]"
        )
        raise ConfigurationError(msg) from exc

    check_bind(host, port)

    config = ServerConfig(
        host=host,
        port=port,
        workers=workers,
        log_level=log_level,
    )
    server = Server(config, app)
    logger.info("Listening on http://%s:%d", host, port)
    server.run()
