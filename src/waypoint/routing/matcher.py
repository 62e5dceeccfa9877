"""Pattern registry with ordered structural matching.

Patterns are held as a list in registration order. Registering a new
list discards the old one wholesale; nothing accumulates.
"""

import logging
from collections.abc import Iterable, Mapping
from urllib.parse import quote

from waypoint._internal.types import QueryValue
from waypoint.errors import ConfigurationError, MissingParamError
from waypoint.routing.pattern import Pattern, PatternMatch, Segment, SegmentKind

logger = logging.getLogger("waypoint.routing")


def parse_segment(part: str) -> Segment:
    """Classify one non-empty path segment.

    Examples::

        "entity"    -> Segment("entity")
        "[id]"      -> Segment("[id]", kind=DYNAMIC, name="id")
        "[...slug]" -> Segment("[...slug]", kind=CATCH_ALL, name="slug")
        "[]"        -> Segment("[]")  # no name, stays literal
    """
    if part.startswith("[") and part.endswith("]"):
        inner = part[1:-1]
        if inner.startswith("..."):
            name = inner[3:]
            if name:
                return Segment(value=part, kind=SegmentKind.CATCH_ALL, name=name)
        elif inner:
            return Segment(value=part, kind=SegmentKind.DYNAMIC, name=inner)
    return Segment(value=part)


def parse_pattern(path: str) -> Pattern:
    """Parse a pattern string into a ``Pattern``.

    Empty segments (leading, trailing or doubled slashes) are ignored.
    """
    segments = tuple(parse_segment(part) for part in path.split("/") if part)
    return Pattern(path=path, segments=segments)


def split_path(path: str) -> list[str]:
    """Split a concrete path into its non-empty segments."""
    return [part for part in path.split("/") if part]


def match_pattern(pattern: Pattern, parts: list[str]) -> dict[str, QueryValue] | None:
    """Match pre-split path *parts* against a single *pattern*.

    Returns the bindings on success, ``None`` otherwise. Both sides must
    be fully consumed for a match.
    """
    bindings: dict[str, QueryValue] = {}
    index = 0

    for position, seg in enumerate(pattern.segments):
        if seg.kind is SegmentKind.CATCH_ALL:
            # Catch-all must be last and needs at least one segment
            if position != len(pattern.segments) - 1 or index >= len(parts):
                return None
            bindings[seg.name or ""] = list(parts[index:])
            return bindings

        if index >= len(parts):
            return None

        part = parts[index]
        if seg.kind is SegmentKind.DYNAMIC:
            bindings[seg.name or ""] = part
        elif seg.value != part:
            return None
        index += 1

    if index != len(parts):
        return None
    return bindings


def _as_list(value: QueryValue) -> list[str]:
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    return [str(value)]


def interpolate(
    pattern_path: str,
    values: Mapping[str, QueryValue],
) -> tuple[str, frozenset[str]]:
    """Fill the placeholders of *pattern_path* from *values*.

    Returns ``(concrete_path, consumed_keys)``. Literal text, including
    leading and trailing slashes, is kept as written; each substituted
    segment is percent-encoded.

    Raises ``MissingParamError`` if a placeholder has no value. A
    catch-all given a single string treats it as a one-element list; an
    empty list counts as missing.
    """
    consumed: set[str] = set()
    parts: list[str] = []

    for part in pattern_path.split("/"):
        seg = parse_segment(part) if part else Segment(value=part)
        if not seg.is_placeholder:
            parts.append(part)
            continue

        name = seg.name or ""
        value = values.get(name)
        if value is None:
            raise MissingParamError(param=name, pattern=pattern_path)

        if seg.kind is SegmentKind.CATCH_ALL:
            items = _as_list(value)
            if not items:
                raise MissingParamError(param=name, pattern=pattern_path)
            parts.append("/".join(quote(item, safe="") for item in items))
        else:
            parts.append(quote(str(value), safe=""))
        consumed.add(name)

    return "/".join(parts), frozenset(consumed)


class PatternRegistry:
    """Ordered, replaceable list of path patterns.

    Usage::

        registry = PatternRegistry()
        registry.register(["/entity/[id]/attribute/[name]", "/[...slug]"])
        match = registry.match("/entity/101/attribute/everything")
        match.bindings  # {"id": "101", "name": "everything"}
    """

    __slots__ = ("_patterns",)

    def __init__(self, paths: Iterable[str] = ()) -> None:
        self._patterns: tuple[Pattern, ...] = ()
        if paths:
            self.register(paths)

    @property
    def patterns(self) -> tuple[Pattern, ...]:
        """Registered patterns in registration order."""
        return self._patterns

    def register(self, paths: Iterable[str]) -> None:
        """Replace every registered pattern with *paths*."""
        if isinstance(paths, str):
            msg = "register_paths() expects a list of pattern strings, not a single string."
            raise ConfigurationError(msg)

        patterns: list[Pattern] = []
        for path in paths:
            if not isinstance(path, str):
                msg = f"Path patterns must be strings, got {type(path).__name__}: {path!r}"
                raise ConfigurationError(msg)
            pattern = parse_pattern(path)
            if not pattern.is_well_formed:
                logger.warning(
                    "Pattern %r has a catch-all before its last segment; it will never match",
                    path,
                )
            patterns.append(pattern)

        self._patterns = tuple(patterns)
        logger.debug("Registered %d path pattern(s)", len(self._patterns))

    def match(self, path: str) -> PatternMatch | None:
        """Return the first registered pattern matching *path*, or ``None``."""
        parts = split_path(path)
        for pattern in self._patterns:
            bindings = match_pattern(pattern, parts)
            if bindings is not None:
                return PatternMatch(pattern=pattern, bindings=bindings)

        if self._patterns:
            logger.debug("No registered pattern matches %r", path)
        return None

    def __len__(self) -> int:
        return len(self._patterns)
