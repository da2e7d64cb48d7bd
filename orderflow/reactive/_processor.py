"""
ReactiveProcessor — the order pipeline as an observable chain.
"""

from __future__ import annotations

from dataclasses import dataclass

import rx
from rx import operators as ops

from orderflow._types import (
    Order,
    Outcome,
    Success,
    Failure,
    OrderNotFound,
    IllegalTransition,
    as_fault,
)
from orderflow.logging import get_logger
from orderflow.reactive._operators import from_async, first_value
from orderflow.steps import OrderSteps

logger = get_logger(__name__)


@dataclass(slots=True)
class ReactiveProcessor:
    steps: OrderSteps

    def _discount_existing(self, order: Order | None) -> rx.Observable:
        if order is None:
            return rx.throw(OrderNotFound())
        return from_async(lambda: self.steps.apply_discount(order))

    def _update(self, order: Order) -> rx.Observable:
        return from_async(lambda: self.steps.update(order))

    def _recover(self, exc: Exception, _source: rx.Observable) -> rx.Observable:
        if isinstance(exc, IllegalTransition):
            return rx.throw(exc)
        fault = as_fault(exc)
        logger.debug("Error processing order.", error=fault.message)
        return rx.return_value(Failure(fault.message))

    def complete_order_process(self, order_id: int) -> rx.Observable:
        """
        Observable that emits exactly one Outcome, then completes.

        Step faults are caught into a Failure element; only
        IllegalTransition reaches on_error.
        """
        return from_async(lambda: self.steps.retrieve(order_id)).pipe(
            ops.flat_map(self._discount_existing),
            ops.flat_map(self._update),
            ops.map(lambda _: Success()),
            ops.catch(self._recover),
        )

    async def process(self, order_id: int) -> Outcome:
        outcome: Outcome = await first_value(self.complete_order_process(order_id))
        return self.steps.conclude(order_id, outcome)


__all__ = ("ReactiveProcessor",)
