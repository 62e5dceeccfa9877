"""In-memory router — current location, navigation and lifecycle events.

``MemoryRouter`` reproduces the observable contract of a client-side
router without a browser: it holds only the current location (never a
history stack), resolves every navigation through the URL codec, the
pattern registry and the query composer, and emits
``routeChangeStart`` / ``routeChangeComplete`` around each one.

Usage::

    router = MemoryRouter()
    router.register_paths(["/entity/[id]/attribute/[name]", "/[...slug]"])

    await router.push("/entity/101/attribute/everything")
    router.query  # {"id": "101", "name": "everything"}

    await router.push({"pathname": "/one/[id]/three", "query": {"id": "two", "four": "4"}})
    router.as_path   # "/one/two/three?four=4"
    router.pathname  # "/one/[id]/three"

When and how the navigation settles is delegated to a completion strategy
(see ``waypoint.scheduling``), selected by ``async_mode``.
"""

import logging
from collections.abc import Awaitable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any
from urllib.parse import unquote

from waypoint._internal.types import PathParser, Query, QueryValue
from waypoint.config import NavigateOptions, RouterConfig, UrlObject
from waypoint.errors import ConfigurationError
from waypoint.events import ROUTE_CHANGE_COMPLETE, ROUTE_CHANGE_START, EventBus
from waypoint.query import compose_query
from waypoint.routing.matcher import PatternRegistry, interpolate, parse_pattern
from waypoint.routing.pattern import Pattern
from waypoint.scheduling import CompletionStrategy, completion_for
from waypoint.url import parse_query, serialize_url, split_url

logger = logging.getLogger("waypoint.router")

NavigationTarget = str | UrlObject | Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class Location:
    """A snapshot of the router's current location.

    ``query`` is a read-only view; mutate the location through navigation.
    """

    pathname: str = ""
    as_path: str = ""
    query: Mapping[str, QueryValue] = field(default_factory=lambda: MappingProxyType({}))
    locale: str | None = None


@dataclass(frozen=True, slots=True)
class _Resolved:
    """A navigation target resolved to its next location fields."""

    pathname: str
    as_path: str
    query: Query


class _Transition:
    """One navigation in flight. Driven by the completion strategy."""

    __slots__ = ("_options", "_resolved", "_router")

    def __init__(self, router: "MemoryRouter", resolved: _Resolved, options: NavigateOptions) -> None:
        self._router = router
        self._resolved = resolved
        self._options = options

    def start(self) -> None:
        self._router.events.emit(
            ROUTE_CHANGE_START, self._resolved.as_path, {"shallow": self._options.shallow}
        )

    def commit(self) -> None:
        self._router._commit(self._resolved, self._options)

    def complete(self) -> None:
        self._router.events.emit(
            ROUTE_CHANGE_COMPLETE, self._resolved.as_path, {"shallow": self._options.shallow}
        )


def _normalize_value(value: Any) -> QueryValue:
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    return str(value)


def _normalize_query(query: Mapping[str, Any] | None) -> Query:
    """Stringify a caller-supplied query, dropping ``None`` values."""
    if not query:
        return {}
    return {str(key): _normalize_value(value) for key, value in query.items() if value is not None}


class MemoryRouter:
    """A router-shaped object that lives entirely in memory.

    Observable state: ``pathname``, ``as_path``, ``query``, ``locale`` and
    the freely assignable ``locales`` list. Subscribe to lifecycle events
    through ``events.on(name, handler)`` / ``events.off(name, handler)``.
    """

    __slots__ = (
        "_async_mode",
        "_completion",
        "_injected_completion",
        "_location",
        "_path_parser",
        "_registry",
        "events",
        "locales",
    )

    def __init__(
        self,
        config: RouterConfig | None = None,
        *,
        completion: CompletionStrategy | None = None,
    ) -> None:
        config = config or RouterConfig()
        self.events = EventBus()
        self.locales: list[str] = list(config.locales)
        self._location = Location()
        self._registry = PatternRegistry()
        self._path_parser: PathParser | None = None
        self._async_mode = config.async_mode
        self._injected_completion = completion
        self._completion = completion or completion_for(config.async_mode)
        if config.path_parser is not None:
            self.set_path_parser(config.path_parser)

    # -- Observable state --

    @property
    def pathname(self) -> str:
        return self._location.pathname

    @property
    def as_path(self) -> str:
        return self._location.as_path

    @property
    def query(self) -> Mapping[str, QueryValue]:
        return self._location.query

    @property
    def locale(self) -> str | None:
        return self._location.locale

    @property
    def location(self) -> Location:
        """The current location as an immutable snapshot."""
        return self._location

    @property
    def patterns(self) -> tuple[Pattern, ...]:
        """Registered path patterns, in registration order."""
        return self._registry.patterns

    @property
    def async_mode(self) -> bool:
        """Whether the commit and ``routeChangeComplete`` wait for a later loop turn.

        A ``completion=`` strategy passed to the constructor is kept when
        this flag changes; only the built-in strategies are swapped.
        """
        return self._async_mode

    @async_mode.setter
    def async_mode(self, value: bool) -> None:
        self._async_mode = bool(value)
        self._completion = self._injected_completion or completion_for(self._async_mode)

    # -- Configuration --

    def set_path_parser(self, parser: PathParser | None) -> None:
        """Install (or with ``None``, remove) the custom path parser.

        The parser receives the decoded path without its query string and
        returns extra query values, which rank above pattern bindings and
        below the explicit query.
        """
        if parser is not None and not callable(parser):
            msg = f"Path parser must be callable, got {type(parser).__name__}"
            raise ConfigurationError(msg)
        self._path_parser = parser

    def register_paths(self, paths: Iterable[str]) -> None:
        """Replace the registered path patterns with *paths*."""
        self._registry.register(paths)

    # -- Navigation --

    def push(
        self,
        target: NavigationTarget,
        as_path: str | None = None,
        options: NavigateOptions | Mapping[str, Any] | None = None,
    ) -> Awaitable[None]:
        """Navigate to *target*.

        *target* is a raw ``path?query`` string, a ``UrlObject``, or a
        mapping with ``pathname`` and optional ``query``. *as_path* is
        accepted for call compatibility and ignored.

        For string targets the path is percent-decoded once and used for
        both ``pathname`` and the base of ``as_path``; the query string is
        re-encoded in its original key order.

        Raises ``MissingParamError`` before any state change if a
        ``pathname`` placeholder has no value in the target's query.
        """
        return self._navigate("push", target, options)

    def replace(
        self,
        target: NavigationTarget,
        as_path: str | None = None,
        options: NavigateOptions | Mapping[str, Any] | None = None,
    ) -> Awaitable[None]:
        """Same as ``push``; there is no history stack to replace into."""
        return self._navigate("replace", target, options)

    async def prefetch(self, *args: Any, **kwargs: Any) -> None:
        """Accepted for interface parity. Does nothing."""
        return None

    def _navigate(
        self,
        method: str,
        target: NavigationTarget,
        options: NavigateOptions | Mapping[str, Any] | None,
    ) -> Awaitable[None]:
        opts = NavigateOptions.coerce(options)
        resolved = self._resolve(target)
        logger.debug("%s %r (shallow=%s)", method, resolved.as_path, opts.shallow)
        return self._completion.settle(_Transition(self, resolved, opts))

    def _resolve(self, target: NavigationTarget) -> _Resolved:
        if isinstance(target, str):
            return self._resolve_url(target)
        return self._resolve_object(target)

    def _resolve_url(self, url: str) -> _Resolved:
        raw_path, query_string = split_url(url)
        path = unquote(raw_path)
        explicit = parse_query(query_string)

        match = self._registry.match(path)
        bindings = match.bindings if match is not None else None

        query = compose_query(bindings, self._parse_path(path), explicit)
        return _Resolved(
            pathname=path,
            as_path=serialize_url(path, explicit),
            query=query,
        )

    def _resolve_object(self, target: UrlObject | Mapping[str, Any]) -> _Resolved:
        if isinstance(target, Mapping):
            pathname = target.get("pathname")
            raw_query = target.get("query")
        else:
            pathname = getattr(target, "pathname", None)
            raw_query = getattr(target, "query", None)
        if pathname is None:
            pathname = self.pathname
        explicit = _normalize_query(raw_query)

        if parse_pattern(pathname).has_placeholders:
            base, consumed = interpolate(pathname, explicit)
        else:
            base, consumed = pathname, frozenset()
        suffix = {key: value for key, value in explicit.items() if key not in consumed}

        query = compose_query(None, self._parse_path(base), explicit)
        return _Resolved(
            pathname=pathname,
            as_path=serialize_url(base, suffix),
            query=query,
        )

    def _parse_path(self, path: str) -> Mapping[str, QueryValue] | None:
        if self._path_parser is None:
            return None
        return self._path_parser(path)

    def _commit(self, resolved: _Resolved, options: NavigateOptions) -> None:
        locale = options.locale if options.locale is not None else self._location.locale
        self._location = Location(
            pathname=resolved.pathname,
            as_path=resolved.as_path,
            query=MappingProxyType(resolved.query),
            locale=locale,
        )
        logger.debug("Committed %r", resolved.as_path)

    def __repr__(self) -> str:
        return (
            f"MemoryRouter(as_path={self.as_path!r}, pathname={self.pathname!r}, "
            f"query={self.query!r}, locale={self.locale!r})"
        )
