"""Shared type aliases used across waypoint modules."""

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

# A single query value — plain string, or a list for catch-all bindings
QueryValue: TypeAlias = str | list[str]

# Ordered query mapping as held in router state
Query: TypeAlias = dict[str, QueryValue]

# User-supplied path parser — receives the raw path, returns extra query values
PathParser: TypeAlias = Callable[[str], Mapping[str, str] | None]

# Event subscriber — variable signature, return value ignored
EventHandler: TypeAlias = Callable[..., Any]
