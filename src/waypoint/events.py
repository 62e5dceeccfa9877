"""Router event bus — named events with synchronous, in-order dispatch.

Subscribers are plain callables held in a list per event name. Emitting
calls each one in registration order with identical arguments before
``emit()`` returns.

The router emits two events per navigation::

    routeChangeStart(url, {"shallow": bool})
    routeChangeComplete(url, {"shallow": bool})
"""

import logging

from waypoint._internal.types import EventHandler

logger = logging.getLogger("waypoint.events")

ROUTE_CHANGE_START = "routeChangeStart"
ROUTE_CHANGE_COMPLETE = "routeChangeComplete"


class EventBus:
    """Minimal publish/subscribe keyed by event name.

    Usage::

        def on_start(url, options):
            print("navigating to", url)

        router.events.on("routeChangeStart", on_start)
        ...
        router.events.off("routeChangeStart", on_start)
    """

    __slots__ = ("_handlers",)

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = {}

    def on(self, name: str, handler: EventHandler) -> None:
        """Subscribe *handler* to *name*. Duplicates are kept and each fires."""
        self._handlers.setdefault(name, []).append(handler)

    def off(self, name: str, handler: EventHandler) -> None:
        """Remove the first registration of *handler* for *name*, if any."""
        handlers = self._handlers.get(name)
        if not handlers:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            return
        if not handlers:
            del self._handlers[name]

    def emit(self, name: str, *args: object, **kwargs: object) -> None:
        """Call every current subscriber of *name* in registration order.

        The subscriber list is copied first, so handlers that subscribe or
        unsubscribe during dispatch affect only later emits. An exception
        raised by a handler is logged and propagates to the emitter.
        """
        handlers = self._handlers.get(name)
        if not handlers:
            return
        for handler in list(handlers):
            try:
                handler(*args, **kwargs)
            except Exception:
                logger.exception("Handler %r for %s raised", handler, name)
                raise

    def handlers(self, name: str) -> tuple[EventHandler, ...]:
        """Current subscribers of *name*, in registration order."""
        return tuple(self._handlers.get(name, ()))

    def clear(self, name: str | None = None) -> None:
        """Drop subscribers for *name*, or for every event when omitted."""
        if name is None:
            self._handlers.clear()
        else:
            self._handlers.pop(name, None)
