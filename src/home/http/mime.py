"""Static extension -> MIME type table.

Keys are lowercase extensions including the dot. The table is plain data so
``StaticFiles`` can be handed a different one (e.g. loaded from a JSON file
shipped with the device image).
"""

from collections.abc import Mapping
from pathlib import PurePosixPath

DEFAULT_CONTENT_TYPE = "application/octet-stream"

MIME_TYPES: Mapping[str, str] = {
    # Text
    ".html": "text/html",
    ".htm": "text/html",
    ".css": "text/css",
    ".txt": "text/plain",
    ".csv": "text/csv",
    ".xml": "application/xml",
    ".md": "text/markdown",
    # Scripts and data
    ".js": "application/javascript",
    ".mjs": "application/javascript",
    ".json": "application/json",
    ".map": "application/json",
    ".wasm": "application/wasm",
    # Images
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".bmp": "image/bmp",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
    ".webp": "image/webp",
    # Fonts
    ".woff": "font/woff",
    ".woff2": "font/woff2",
    ".ttf": "font/ttf",
    ".otf": "font/otf",
    # Media and archives
    ".mp3": "audio/mpeg",
    ".wav": "audio/wav",
    ".mp4": "video/mp4",
    ".pdf": "application/pdf",
    ".zip": "application/zip",
    ".gz": "application/gzip",
}


def content_type_for(path: str, mime_types: Mapping[str, str] = MIME_TYPES) -> str:
    """Look up the MIME type for *path* by its extension.

    Unknown or missing extensions map to ``application/octet-stream``.
    """
    return mime_types.get(PurePosixPath(path).suffix.lower(), DEFAULT_CONTENT_TYPE)
