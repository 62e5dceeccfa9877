"""Completion strategies — when a navigation commits and completes.

``push()`` and ``replace()`` compute the next location synchronously and
hand a ``Transition`` to the router's completion strategy. The strategy
decides how far control suspends before the transition commits:

``ImmediateCompletion``
    Commit, ``routeChangeStart`` and ``routeChangeComplete`` all run inside
    the call. The returned awaitable is already settled.

``DeferredCompletion``
    ``routeChangeStart`` runs inside the call. Commit and
    ``routeChangeComplete`` are scheduled on the running asyncio loop for
    its next turn, so they happen whether or not anyone awaits. Pushes
    settle in the order they were made. Without a running asyncio loop
    (plain sync code, or a trio backend) the transition settles on first
    await instead, after ``anyio.lowlevel.checkpoint()``.

Both return plain awaitables rather than coroutines, so a caller that
never awaits gets no "coroutine was never awaited" warning.
"""

import asyncio
from collections.abc import Awaitable, Generator
from typing import Any, Protocol

import anyio.lowlevel


class Transition(Protocol):
    """The three steps of a navigation, in contract order."""

    def start(self) -> None: ...
    def commit(self) -> None: ...
    def complete(self) -> None: ...


class CompletionStrategy(Protocol):
    def settle(self, transition: Transition) -> Awaitable[None]: ...


class Completed:
    """An awaitable that is already settled."""

    __slots__ = ()

    def __await__(self) -> Generator[Any, None, None]:
        return _settled().__await__()

    def __repr__(self) -> str:
        return "Completed()"


async def _settled() -> None:
    return None


class PendingCompletion:
    """Commits and completes a transition on the loop's next turn.

    Awaiting waits for that turn. Awaiting again (or concurrently) is
    harmless; the transition settles exactly once.
    """

    __slots__ = ("_done", "_settled", "_transition")

    def __init__(self, transition: Transition) -> None:
        self._transition = transition
        self._settled = False
        self._done: asyncio.Future[None] | None = None
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return
        self._done = loop.create_future()
        loop.call_soon(self._on_next_turn)

    @property
    def settled(self) -> bool:
        return self._settled

    def _settle_now(self) -> None:
        if self._settled:
            return
        self._settled = True
        self._transition.commit()
        self._transition.complete()

    def _on_next_turn(self) -> None:
        done = self._done
        if done is None or done.done():
            return
        try:
            self._settle_now()
        except Exception as exc:
            done.set_exception(exc)
        else:
            done.set_result(None)

    def __await__(self) -> Generator[Any, None, None]:
        return self._wait().__await__()

    async def _wait(self) -> None:
        if self._done is not None:
            await self._done
            return
        await anyio.lowlevel.checkpoint()
        self._settle_now()

    def __repr__(self) -> str:
        state = "settled" if self._settled else "pending"
        return f"PendingCompletion({state})"


class ImmediateCompletion:
    """Run the whole transition before returning."""

    __slots__ = ()

    def settle(self, transition: Transition) -> Awaitable[None]:
        transition.commit()
        transition.start()
        transition.complete()
        return Completed()


class DeferredCompletion:
    """Fire ``start`` now; commit and complete on the next loop turn."""

    __slots__ = ()

    def settle(self, transition: Transition) -> Awaitable[None]:
        transition.start()
        return PendingCompletion(transition)


def completion_for(async_mode: bool) -> CompletionStrategy:
    """Return the built-in strategy for the router's mode flag."""
    if async_mode:
        return DeferredCompletion()
    return ImmediateCompletion()
