"""
EventProcessor — the order pipeline behind an event aggregator.
"""

from __future__ import annotations

from orderflow._types import (
    Outcome,
    Success,
    Failure,
    OrderNotFound,
    IllegalTransition,
    as_fault,
)
from orderflow.events._aggregator import EventAggregator
from orderflow.events._types import OrderRequested, OrderSucceeded, OrderFailed
from orderflow.logging import get_logger
from orderflow.steps import OrderSteps

logger = get_logger(__name__)


def _first_leaf(group: BaseExceptionGroup) -> BaseException:
    exc: BaseException = group
    while isinstance(exc, BaseExceptionGroup):
        exc = exc.exceptions[0]
    return exc


class EventProcessor:
    """
    Listens for OrderRequested and answers with OrderSucceeded or OrderFailed.

    Example:
        events = EventAggregator()
        events.subscribe(OrderSucceeded, on_success)
        events.subscribe(OrderFailed, on_failure)

        EventProcessor(steps, events)
        await events.publish(OrderRequested(123))
    """

    def __init__(self, steps: OrderSteps, events: EventAggregator) -> None:
        self.steps = steps
        self.events = events
        events.subscribe(OrderRequested, self._on_requested)

    async def _on_requested(self, event: OrderRequested) -> None:
        order_id = event.order_id
        try:
            order = await self.steps.retrieve(order_id)
            if order is None:
                raise OrderNotFound()
            discounted = await self.steps.apply_discount(order)
            await self.steps.update(discounted)
        except IllegalTransition:
            raise
        except Exception as exc:
            fault = as_fault(exc)
            logger.debug("Error processing order.", error=fault.message)
            self.steps.conclude(order_id, Failure(fault.message))
            await self.events.publish(OrderFailed(order_id=order_id, error=fault.message))
        else:
            self.steps.conclude(order_id, Success())
            await self.events.publish(OrderSucceeded(order_id=order_id))

    async def process(self, order_id: int) -> Outcome:
        """
        Publish a request and return the outcome its terminal event carried.

        On a shared bus several processors may answer one request; the
        first terminal event for `order_id` wins. Failures of other
        listeners are logged and do not replace the outcome. An
        IllegalTransition raised by any processor propagates.
        """
        received: list[Outcome] = []

        async def on_success(event: OrderSucceeded) -> None:
            if event.order_id == order_id:
                received.append(Success())

        async def on_failure(event: OrderFailed) -> None:
            if event.order_id == order_id:
                received.append(Failure(event.error))

        unsubscribe = (
            self.events.subscribe(OrderSucceeded, on_success),
            self.events.subscribe(OrderFailed, on_failure),
        )
        try:
            await self.events.publish(OrderRequested(order_id=order_id))
        except ExceptionGroup as group:
            bugs, others = group.split(IllegalTransition)
            if bugs is not None:
                raise _first_leaf(bugs) from group
            if not received:
                raise
            logger.warning(
                "Order listener failed.",
                order_id=order_id,
                errors=[str(exc) for exc in others.exceptions],
            )
        finally:
            for cancel in unsubscribe:
                cancel()

        if not received:
            raise RuntimeError(f"no processor answered the request for order {order_id}")
        return received[0]


__all__ = ("EventProcessor",)
