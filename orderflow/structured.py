"""
Structured — the order pipeline as plain async/await.

One try block around three awaits; any step fault becomes a Failure.
IllegalTransition is a bookkeeping bug and propagates.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderflow._types import (
    Outcome,
    Success,
    Failure,
    OrderNotFound,
    IllegalTransition,
    as_fault,
)
from orderflow.logging import get_logger
from orderflow.steps import OrderSteps

logger = get_logger(__name__)


@dataclass(slots=True)
class AwaitProcessor:
    steps: OrderSteps

    async def process(self, order_id: int) -> Outcome:
        outcome: Outcome
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
            outcome = Failure(fault.message)
        else:
            outcome = Success()

        return self.steps.conclude(order_id, outcome)


__all__ = ("AwaitProcessor",)
