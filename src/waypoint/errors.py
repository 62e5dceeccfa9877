"""Waypoint exception hierarchy.

Shared across the router, the pattern registry and the codec so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class WaypointError(Exception):
    """Base for all waypoint-specific errors."""


class ConfigurationError(WaypointError):
    """Raised when router configuration is invalid.

    Typically raised by ``MemoryRouter.set_path_parser()`` or
    ``MemoryRouter.register_paths()`` when handed the wrong kind of value.
    """


@dataclass(frozen=True, slots=True)
class MissingParamError(WaypointError):
    """A pattern placeholder had no value to interpolate.

    Raised while building the display path for a structured navigation
    target such as ``{"pathname": "/users/[id]", "query": {}}``. The
    navigation is aborted before any state changes or events fire.
    """

    param: str
    pattern: str

    def __str__(self) -> str:
        return f"Missing value for [{self.param}] in {self.pattern!r}"
