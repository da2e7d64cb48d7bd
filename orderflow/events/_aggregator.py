"""
EventAggregator — typed in-process publish/subscribe.

Publishers and listeners only share event types; neither holds a
reference to the other.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from orderflow.logging import get_logger

logger = get_logger(__name__)

type Handler[E] = Callable[[E], Awaitable[None]]


class EventAggregator:
    """
    Routes events to listeners by event type.

    publish() awaits every listener in subscription order. A failing
    listener does not stop delivery to the others; the failures are
    raised together as an ExceptionGroup once all listeners ran.
    """

    def __init__(self) -> None:
        self._handlers: dict[type[Any], list[Handler[Any]]] = {}

    def subscribe[E](self, event_type: type[E], handler: Handler[E]) -> Callable[[], None]:
        """Register handler for event_type. Returns an unsubscribe callable."""
        self._handlers.setdefault(event_type, []).append(handler)

        def unsubscribe() -> None:
            handlers = self._handlers.get(event_type, [])
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def subscribers(self, event_type: type[Any]) -> int:
        return len(self._handlers.get(event_type, ()))

    async def publish(self, event: object) -> int:
        """Deliver event to its listeners. Returns how many ran."""
        handlers = tuple(self._handlers.get(type(event), ()))
        logger.debug(
            "Publishing event.",
            topic=getattr(event, "topic", type(event).__name__),
            listeners=len(handlers),
        )

        errors: list[Exception] = []
        for handler in handlers:
            try:
                await handler(event)
            except Exception as exc:
                errors.append(exc)

        if errors:
            raise ExceptionGroup(f"{len(errors)} listener(s) failed", errors)
        return len(handlers)


__all__ = ("Handler", "EventAggregator")
