"""Template cache and placeholder substitution.

Views are plain HTML files under a views directory. A placeholder is a
dotted path in braces, ``{device.sn}``, resolved against the data the
handler returned. Unresolvable placeholders are left as they are, so a
view can be rendered with partial data.

The cache is shared by every request. It is populated without a lock:
two requests may load the same view concurrently, and both store an
identical, fully read ``TemplateEntry`` with one dict assignment.
"""

import html
import json
import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import asdict, dataclass, is_dataclass
from pathlib import Path
from typing import Any

import anyio

logger = logging.getLogger("home.views")

PLACEHOLDER = re.compile(r"\{([$\w.-]+)\}")

_MISSING = object()


@dataclass(frozen=True, slots=True)
class TemplateEntry:
    """Cached result of looking up one view."""

    present: bool
    content: str | None = None


def to_tree(value: Any) -> Any:
    """Convert dataclass instances to plain dicts; leave other values alone."""
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    return value


def _lookup(data: Any, keys: list[str]) -> Any:
    node = data
    for key in keys:
        node = to_tree(node)
        if isinstance(node, Mapping):
            if key not in node:
                return _MISSING
            node = node[key]
        elif isinstance(node, Sequence) and not isinstance(node, (str, bytes)):
            try:
                node = node[int(key)]
            except (ValueError, IndexError):
                return _MISSING
        else:
            return _MISSING
    return node


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(to_tree(value), separators=(",", ":"), default=str)


def render_template(template: str, data: Any, *, autoescape: bool = False) -> str:
    """Substitute ``{dotted.key}`` placeholders in *template* from *data*.

    Mappings are walked by key, lists and tuples by integer index::

        >>> render_template("Hello {user.name}!", {"user": {"name": "Ann"}})
        'Hello Ann!'
        >>> render_template("Hello {user.name}!", {})
        'Hello {user.name}!'
    """
    if data is None:
        data = {}

    def replace(match: re.Match[str]) -> str:
        value = _lookup(data, match.group(1).split("."))
        if value is _MISSING:
            return match.group(0)
        text = _stringify(value)
        return html.escape(text) if autoescape else text

    return PLACEHOLDER.sub(replace, template)


class TemplateCache:
    """Lazily loaded, process-lifetime cache of views.

    ``load("widget")`` reads ``<directory>/widget.html`` on first use and
    remembers the result, including misses. Edits to a view file after it
    was loaded are not picked up until ``clear()``.
    """

    __slots__ = ("_autoescape", "_directory", "_entries")

    def __init__(self, directory: str | Path, *, autoescape: bool = False) -> None:
        self._directory = Path(directory).resolve()
        self._autoescape = autoescape
        self._entries: dict[str, TemplateEntry] = {}

    @property
    def directory(self) -> Path:
        return self._directory

    @staticmethod
    def view_name(path: str) -> str:
        """Map a request path to a view name.

        ``/`` -> ``index``, ``/widget`` -> ``widget``, ``/docs/`` -> ``docs/index``.
        """
        name = path.strip("/")
        if not name:
            return "index"
        if path.endswith("/"):
            return f"{name}/index"
        return name

    def cached(self, name: str) -> TemplateEntry | None:
        """The cache entry for *name*, or None if it was never looked up."""
        return self._entries.get(name)

    def clear(self) -> None:
        self._entries.clear()

    async def load(self, name: str) -> str | None:
        """Return the template text for *name*, or None if no such view."""
        entry = self._entries.get(name)
        if entry is None:
            entry = await self._read(name)
            self._entries[name] = entry
        return entry.content if entry.present else None

    async def render(self, name: str, data: Any) -> str | None:
        """Render view *name* with *data*; None if the view does not exist."""
        template = await self.load(name)
        if template is None:
            return None
        return render_template(template, data, autoescape=self._autoescape)

    async def _read(self, name: str) -> TemplateEntry:
        view_path = anyio.Path(self._directory / f"{name}.html")
        try:
            resolved = await view_path.resolve()
        except (OSError, ValueError):
            logger.debug("Invalid view name %r", name)
            return TemplateEntry(present=False)
        if not Path(resolved).is_relative_to(self._directory):
            logger.warning("Refusing view outside %s: %r", self._directory, name)
            return TemplateEntry(present=False)

        try:
            content = await resolved.read_text(encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
            logger.debug("No view %r", name)
            return TemplateEntry(present=False)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Unreadable view %r: %s", name, exc)
            return TemplateEntry(present=False)

        return TemplateEntry(present=True, content=content)
