"""Route frozen dataclass."""

from __future__ import annotations

from dataclasses import dataclass

from home.errors import ConfigurationError
from home.middleware.protocol import Middleware


@dataclass(frozen=True, slots=True)
class Route:
    """A registered route.

    ``path`` is the exact path (trailing slash stripped, except for the
    root route ``/``) and ``prefix_path`` the same path with exactly one
    trailing slash. Both are computed once, in ``Route.create()``.
    """

    path: str
    prefix_path: str
    handler: Middleware
    method: str | None = None
    prefix_match: bool = False

    @classmethod
    def create(
        cls,
        pattern: str,
        handler: Middleware,
        *,
        method: str | None = None,
        prefix_match: bool = False,
    ) -> Route:
        """Normalize *pattern* and build a Route.

        Examples::

            "/"     -> path "/",    prefix_path "/"
            "/foo"  -> path "/foo", prefix_path "/foo/"
            "/foo/" -> path "/foo", prefix_path "/foo/"
        """
        if not pattern.startswith("/"):
            msg = f"Route path {pattern!r} must start with '/'."
            raise ConfigurationError(msg)

        if pattern == "/":
            path = prefix_path = "/"
        elif pattern.endswith("/"):
            path, prefix_path = pattern[:-1], pattern
        else:
            path, prefix_path = pattern, pattern + "/"

        return cls(
            path=path,
            prefix_path=prefix_path,
            handler=handler,
            method=method.upper() if method else None,
            prefix_match=prefix_match,
        )

    def matches(self, method: str, path: str) -> bool:
        if self.method is not None and self.method != method:
            return False
        return path == self.path or (self.prefix_match and path.startswith(self.prefix_path))

    def relative_path(self, path: str) -> str:
        """The part of *path* below this route's mount point.

        Only prefix routes other than ``/`` strip anything; the mount
        point itself maps to ``/``.
        """
        if not self.prefix_match or self.path == "/":
            return path
        return path[len(self.path) :] or "/"
