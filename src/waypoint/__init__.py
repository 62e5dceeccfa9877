"""Waypoint — an in-memory router for exercising navigation code.

Tracks the current location (path, query, locale), mutates it through
``push`` / ``replace``, and emits ``routeChangeStart`` /
``routeChangeComplete`` around each navigation. No browser, no framework
runtime, no history stack.

Basic usage::

    from waypoint import MemoryRouter

    router = MemoryRouter()
    router.register_paths(["/posts/[id]"])

    await router.push("/posts/42?tab=comments")
    router.query  # {"id": "42", "tab": "comments"}
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "EventBus",
    "Location",
    "MemoryRouter",
    "MissingParamError",
    "NavigateOptions",
    "PatternRegistry",
    "RouterConfig",
    "UrlObject",
    "WaypointError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waypoint`` fast while providing a clean top-level API.
    """
    if name in ("MemoryRouter", "Location"):
        from waypoint import router as _router

        return getattr(_router, name)

    if name in ("RouterConfig", "NavigateOptions", "UrlObject"):
        from waypoint import config as _config

        return getattr(_config, name)

    if name == "EventBus":
        from waypoint.events import EventBus

        return EventBus

    if name == "PatternRegistry":
        from waypoint.routing.matcher import PatternRegistry

        return PatternRegistry

    if name in ("ConfigurationError", "MissingParamError", "WaypointError"):
        from waypoint import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
