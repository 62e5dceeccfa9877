"""Segment, Pattern and PatternMatch frozen dataclasses."""

from dataclasses import dataclass
from enum import Enum

from waypoint._internal.types import QueryValue


class SegmentKind(Enum):
    """How a pattern segment consumes path segments."""

    LITERAL = "literal"
    DYNAMIC = "dynamic"
    CATCH_ALL = "catch_all"


@dataclass(frozen=True, slots=True)
class Segment:
    """A parsed segment of a path pattern.

    Literal:   ``/entity``    (kind=LITERAL, name=None)
    Dynamic:   ``/[id]``      (kind=DYNAMIC, name="id")
    Catch-all: ``/[...slug]`` (kind=CATCH_ALL, name="slug")
    """

    value: str
    kind: SegmentKind = SegmentKind.LITERAL
    name: str | None = None

    @property
    def is_placeholder(self) -> bool:
        return self.kind is not SegmentKind.LITERAL


@dataclass(frozen=True, slots=True)
class Pattern:
    """A registered path pattern: its source text plus parsed segments."""

    path: str
    segments: tuple[Segment, ...]

    @property
    def has_placeholders(self) -> bool:
        return any(seg.is_placeholder for seg in self.segments)

    @property
    def is_well_formed(self) -> bool:
        """False when a catch-all segment appears anywhere but last."""
        return all(
            seg.kind is not SegmentKind.CATCH_ALL
            for seg in self.segments[:-1]
        )


@dataclass(frozen=True, slots=True)
class PatternMatch:
    """Result of a successful pattern match."""

    pattern: Pattern
    bindings: dict[str, QueryValue]
