"""Test helpers for code that drives a ``MemoryRouter``.

``EventRecorder`` is a callable that remembers every invocation, handy as
an event subscriber. ``assert_location`` compares selected location
fields and produces a clear error message on failure.

Usage::

    start = EventRecorder()
    router.events.on("routeChangeStart", start)
    await router.push("/one")
    start.assert_called_with("/one", {"shallow": False})
    assert_location(router, pathname="/one", query={})
"""

from dataclasses import dataclass, field
from typing import Any

from waypoint.router import MemoryRouter


@dataclass(frozen=True, slots=True)
class Call:
    """One recorded invocation."""

    args: tuple[Any, ...]
    kwargs: dict[str, Any] = field(default_factory=dict)


class EventRecorder:
    """Records the arguments of every call made to it."""

    __slots__ = ("calls",)

    def __init__(self) -> None:
        self.calls: list[Call] = []

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        self.calls.append(Call(args=args, kwargs=kwargs))

    @property
    def called(self) -> bool:
        return bool(self.calls)

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def last(self) -> Call | None:
        return self.calls[-1] if self.calls else None

    def reset(self) -> None:
        self.calls.clear()

    def assert_called_with(self, *args: Any, **kwargs: Any) -> None:
        """Assert at least one recorded call had exactly these arguments."""
        expected = Call(args=args, kwargs=kwargs)
        assert expected in self.calls, (
            f"Expected a call with {args!r} {kwargs!r}.\n"
            f"Recorded calls: {self.calls!r}"
        )

    def assert_not_called(self) -> None:
        assert not self.calls, f"Expected no calls, got {self.calls!r}"


def assert_location(router: MemoryRouter, **expected: Any) -> None:
    """Assert each given location field equals its expected value.

    Accepted fields: ``pathname``, ``as_path``, ``query``, ``locale``.
    Query comparison ignores key order.
    """
    for name, value in expected.items():
        actual = getattr(router.location, name)
        assert actual == value, (
            f"Expected {name}={value!r}, got {actual!r}.\n"
            f"Router: {router!r}"
        )
