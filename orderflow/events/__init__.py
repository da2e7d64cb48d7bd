"""
Events — the order pipeline behind a publish/subscribe aggregator.

    from orderflow import events as E

    bus = E.EventAggregator()
    bus.subscribe(E.OrderSucceeded, announce)
    E.EventProcessor(steps, bus)
    await bus.publish(E.OrderRequested(123))
"""

from orderflow.events._types import OrderRequested, OrderSucceeded, OrderFailed
from orderflow.events._aggregator import Handler, EventAggregator
from orderflow.events._processor import EventProcessor

__all__ = (
    "OrderRequested",
    "OrderSucceeded",
    "OrderFailed",
    "Handler",
    "EventAggregator",
    "EventProcessor",
)
