"""The outgoing response every middleware writes to.

``ResponseSink`` is the only writer of ASGI response messages. Its
``headers_sent`` and ``finished`` properties are what the dispatcher checks
before it serializes a result or an error, so a handler that writes its own
response is never written over.
"""

import logging

from home._internal.asgi import Send, body_message, start_message

logger = logging.getLogger("home.server")


class ResponseSink:
    """Mutable, write-once HTTP response bound to an ASGI ``send``.

    Status and headers may change until the first ``write()`` or ``end()``
    call sends them. ``end()`` on a finished response is a no-op.
    """

    __slots__ = ("_finished", "_headers", "_headers_sent", "_send", "status")

    def __init__(self, send: Send) -> None:
        self._send = send
        self.status = 200
        # lowercase name -> (name as set, value)
        self._headers: dict[str, tuple[str, str]] = {}
        self._headers_sent = False
        self._finished = False

    # -- State --

    @property
    def headers_sent(self) -> bool:
        """True once status and headers have gone out on the wire."""
        return self._headers_sent

    @property
    def finished(self) -> bool:
        """True once the final body message has gone out."""
        return self._finished

    # -- Headers --

    def set_header(self, name: str, value: str) -> None:
        """Set *name* to *value*, replacing any earlier value."""
        if self._headers_sent:
            msg = f"Cannot set header {name!r} after headers are sent."
            raise RuntimeError(msg)
        self._headers[name.lower()] = (name, value)

    def get_header(self, name: str) -> str | None:
        entry = self._headers.get(name.lower())
        return entry[1] if entry is not None else None

    def remove_header(self, name: str) -> None:
        if self._headers_sent:
            msg = f"Cannot remove header {name!r} after headers are sent."
            raise RuntimeError(msg)
        self._headers.pop(name.lower(), None)

    @property
    def headers(self) -> dict[str, str]:
        """Snapshot of the headers set so far."""
        return dict(self._headers.values())

    # -- Body --

    async def write(self, data: str | bytes) -> None:
        """Send a body chunk, sending status and headers first if needed."""
        if self._finished:
            msg = "Cannot write to a response that has already ended."
            raise RuntimeError(msg)
        await self._send_headers()
        chunk = data.encode("utf-8") if isinstance(data, str) else data
        if chunk:
            await self._send(body_message(chunk, more_body=True))

    async def end(self, data: str | bytes = b"") -> None:
        """Send the final body chunk and close the response."""
        if self._finished:
            logger.debug("Ignoring end() on a finished response")
            return
        await self._send_headers()
        chunk = data.encode("utf-8") if isinstance(data, str) else data
        self._finished = True
        await self._send(body_message(chunk, more_body=False))

    async def _send_headers(self) -> None:
        if self._headers_sent:
            return
        self._headers_sent = True
        await self._send(start_message(self.status, self._headers.values()))
