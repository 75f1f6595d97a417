"""Home exception hierarchy.

Shared across the route table, dispatcher, static middleware and app so
every module raises and catches the same types.
"""

from dataclasses import dataclass
from typing import Any


class HomeError(Exception):
    """Base for all home-specific errors."""


class ConfigurationError(HomeError):
    """Raised when routes or app configuration are invalid.

    Typically raised at registration time, before the app serves requests.
    """


class BindError(HomeError):
    """Raised by ``App.listen()`` when the address cannot be bound."""


@dataclass(frozen=True, slots=True)
class ExpectedError(HomeError):
    """An error a handler raises on purpose to answer with a status code.

    The dispatcher renders ``<error_views_folder>/<status_code>`` when such
    a view exists, otherwise the message itself::

        raise ExpectedError("Sensor offline", 503)
    """

    message: str
    status_code: int = 500

    def __str__(self) -> str:
        return f"{self.status_code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Template data for error views."""
        return {"message": self.message, "status_code": self.status_code}


class NotFound(ExpectedError):  # noqa: N818
    """404: no route produced a result for the request path."""

    def __init__(self, path: str, message: str = "Page Not Found") -> None:
        super().__init__(message=message, status_code=404)
        object.__setattr__(self, "path", path)

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "path": self.path}
