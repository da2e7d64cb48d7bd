"""
ChainProcessor — the order pipeline as a Result chain.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from kungfu import Ok, Error

from orderflow._types import (
    Outcome,
    Success,
    Failure,
    OrderNotFound,
    StepFault,
    IllegalTransition,
    as_fault,
)
from orderflow.chain._types import Then
from orderflow.chain._step import from_async, from_optional
from orderflow.chain._run import run
from orderflow.logging import get_logger
from orderflow.steps import OrderSteps

logger = get_logger(__name__)

# Bookkeeping errors escape run() instead of becoming a ChainError.
_BUGS = (IllegalTransition,)


@dataclass(slots=True)
class ChainProcessor:
    """retrieve → discount → update, stopping at the first Error."""

    steps: OrderSteps

    def order_chain(self, order_id: int) -> Then[Any, None, Any, StepFault]:
        steps = self.steps
        return (
            from_optional(
                lambda: steps.retrieve(order_id),
                on_missing=OrderNotFound,
                on_error=as_fault,
                passthrough=_BUGS,
                label="retrieve",
            )
            .then(lambda order: from_async(
                lambda: steps.apply_discount(order),
                on_error=as_fault,
                passthrough=_BUGS,
                label="discount",
            ))
            .then(lambda order: from_async(
                lambda: steps.update(order),
                on_error=as_fault,
                passthrough=_BUGS,
                label="update",
            ))
        )

    async def process(self, order_id: int) -> Outcome:
        result = await run(self.order_chain(order_id))

        outcome: Outcome
        match result:
            case Ok(_):
                outcome = Success()
            case Error(e):
                logger.debug("Error processing order.", step=e.label, error=e.error.message)
                outcome = Failure(e.error.message)

        return self.steps.conclude(order_id, outcome)


__all__ = ("ChainProcessor",)
