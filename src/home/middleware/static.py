"""Static file serving middleware.

Serves files from a directory, preferring a pre-compressed ``<file>.gz``
sibling when one exists. Mount it with ``use()``::

    app.use("/", StaticFiles("static"))
    app.use("/assets", StaticFiles("/flash/assets", index="app.html"))

Returns ``NEXT`` for paths with no matching file, so routes registered
after it still get a chance.
"""

import logging
import stat
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import anyio

from home.errors import ExpectedError
from home.http.mime import MIME_TYPES, content_type_for
from home.http.request import Request
from home.http.sink import ResponseSink
from home.middleware.protocol import NEXT, Outcome

logger = logging.getLogger("home.static")


@dataclass(frozen=True, slots=True)
class _Candidate:
    path: anyio.Path
    gzipped: bool
    size: int = 0


class StaticFiles:
    """Middleware that serves static files from a directory.

    Security: resolves symlinks and verifies the final path is within
    the configured directory to prevent path traversal.
    """

    __slots__ = ("_chunk_size", "_directory", "_index", "_mime_types")

    def __init__(
        self,
        directory: str | Path,
        index: str = "/index.html",
        *,
        mime_types: Mapping[str, str] = MIME_TYPES,
        chunk_size: int = 16 * 1024,
    ) -> None:
        self._directory = Path(directory).resolve()
        self._mime_types = mime_types
        self._chunk_size = chunk_size

        # Normalize index: ensure leading slash
        if index and not index.startswith("/"):
            index = "/" + index
        self._index = index

    @property
    def directory(self) -> Path:
        return self._directory

    @property
    def index(self) -> str:
        return self._index

    async def __call__(self, request: Request, response: ResponseSink) -> Outcome:
        """Stream the requested file or return ``NEXT``."""
        url_path = self._index if request.path == "/" else request.path
        relative = url_path.lstrip("/")

        file_path = anyio.Path(self._directory / relative)
        resolved = await self._resolve(file_path)
        if resolved is None or resolved == self._directory:
            return NEXT
        self._check_contained(resolved)

        target = await self._find(file_path)
        if target is None:
            return NEXT
        # The .gz sibling can be a symlink of its own
        self._check_contained(await self._resolve(target.path))

        if target.gzipped:
            response.set_header("Content-Encoding", "gzip")
        response.set_header("Content-Length", str(target.size))
        response.set_header("Content-Type", content_type_for(url_path, self._mime_types))

        logger.debug("Serving %s (%d bytes)", target.path, target.size)

        async with await anyio.open_file(target.path, "rb") as f:
            while chunk := await f.read(self._chunk_size):
                await response.write(chunk)
        await response.end()
        return None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    async def _resolve(file_path: anyio.Path) -> Path | None:
        """Resolve symlinks, or None for paths the OS rejects (e.g. NUL bytes)."""
        try:
            return Path(await file_path.resolve())
        except (OSError, ValueError):
            return None

    def _check_contained(self, resolved: Path | None) -> None:
        if resolved is None or not resolved.is_relative_to(self._directory):
            raise ExpectedError("Forbidden", 403)

    async def _find(self, file_path: anyio.Path) -> _Candidate | None:
        """First existing regular file among ``<path>.gz`` and ``<path>``."""
        candidates = (
            _Candidate(path=file_path.with_name(file_path.name + ".gz"), gzipped=True),
            _Candidate(path=file_path, gzipped=False),
        )
        for candidate in candidates:
            try:
                st = await candidate.path.stat()
            except (OSError, ValueError):
                continue
            if stat.S_ISREG(st.st_mode):
                return _Candidate(path=candidate.path, gzipped=candidate.gzipped, size=st.st_size)
        return None
