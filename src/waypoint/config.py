"""Router configuration and per-navigation inputs.

``RouterConfig`` seeds a new ``MemoryRouter``: advertised locales, whether
completion is deferred, and an optional path parser. The router copies
these into its own fields, so ``locales`` and ``async_mode`` stay
assignable afterwards. ``NavigateOptions`` and ``UrlObject`` are the typed
forms of the options mapping and structured target that ``push`` accepts.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from waypoint._internal.types import PathParser, QueryValue


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(locales=("en", "fr"), async_mode=True)
    """

    # Locale tags the holder advertises; recorded only, never used for rewriting
    locales: tuple[str, ...] = ()

    # Defer routeChangeComplete (and the state commit) until the caller awaits
    async_mode: bool = False

    # Optional hook turning the raw path into extra query values
    path_parser: PathParser | None = None


@dataclass(frozen=True, slots=True)
class NavigateOptions:
    """Per-navigation options accepted by ``push`` and ``replace``.

    ``shallow`` is forwarded verbatim to event listeners. ``locale``, when
    set, replaces the router's current locale.
    """

    shallow: bool = False
    locale: str | None = None

    @classmethod
    def coerce(cls, options: "NavigateOptions | Mapping[str, object] | None") -> "NavigateOptions":
        """Accept ``None``, a mapping, or an existing ``NavigateOptions``."""
        if options is None:
            return cls()
        if isinstance(options, NavigateOptions):
            return options
        locale = options.get("locale")
        return cls(
            shallow=bool(options.get("shallow", False)),
            locale=str(locale) if locale is not None else None,
        )


@dataclass(frozen=True, slots=True)
class UrlObject:
    """A structured navigation target.

    ``pathname`` may contain ``[name]`` / ``[...name]`` placeholders that
    are filled from ``query`` when the display path is built.
    """

    pathname: str
    query: Mapping[str, QueryValue] = field(default_factory=dict)
