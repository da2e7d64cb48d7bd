"""
Stub steps — retrieve, apply discount, update.

Each step logs a line, sleeps for the configured latency and returns.
Failure paths are switched on through StepsConfig:

    steps = OrderSteps(StepsConfig(latency=0, discount_error="No discounts today"))
"""

from __future__ import annotations

import asyncio
from collections import Counter
from dataclasses import dataclass, field

from orderflow._types import (
    Order,
    Outcome,
    Stage,
    DiscountFault,
    UpdateFault,
    IllegalTransition,
    terminal_stage,
)
from orderflow.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class StepsConfig:
    """Latency and fault switches for the stub steps."""

    latency: float = 1.0
    missing: bool = False
    discount_error: str | None = None
    update_error: str | None = None


@dataclass(slots=True)
class OrderSteps:
    """
    The three stub operations shared by every variant.

    `calls` counts step invocations; `journal(order_id)` returns the
    stage history recorded for that order.
    """

    config: StepsConfig = field(default_factory=StepsConfig)
    calls: Counter[str] = field(default_factory=Counter)
    _journals: dict[int, list[Stage]] = field(default_factory=dict)

    async def retrieve(self, order_id: int) -> Order | None:
        self._advance(order_id, Stage.RETRIEVING)
        self.calls["retrieve"] += 1
        logger.info("Retrieving order.", order_id=order_id)
        await asyncio.sleep(self.config.latency)
        if self.config.missing:
            return None
        return Order(id=order_id)

    async def apply_discount(self, order: Order) -> Order:
        self._advance(order.id, Stage.DISCOUNTING)
        self.calls["apply_discount"] += 1
        logger.info("Applying discounts.", order_id=order.id)
        await asyncio.sleep(self.config.latency)
        if self.config.discount_error is not None:
            raise DiscountFault(self.config.discount_error)
        return order

    async def update(self, order: Order) -> None:
        self._advance(order.id, Stage.UPDATING)
        self.calls["update"] += 1
        logger.info("Updating order.", order_id=order.id)
        await asyncio.sleep(self.config.latency)
        if self.config.update_error is not None:
            raise UpdateFault(self.config.update_error)

    def conclude(self, order_id: int, outcome: Outcome) -> Outcome:
        """Record the terminal stage of a run. Called once per run."""
        stage = terminal_stage(outcome)
        self._advance(order_id, stage)
        logger.debug("Order run concluded.", order_id=order_id, stage=stage.value)
        return outcome

    def journal(self, order_id: int) -> list[Stage]:
        return list(self._journals.get(order_id, ()))

    def _advance(self, order_id: int, nxt: Stage) -> None:
        history = self._journals.setdefault(order_id, [])
        current = history[-1] if history else Stage.PENDING
        if not current.can_advance_to(nxt):
            raise IllegalTransition(
                f"order {order_id}: {current.value} -> {nxt.value}"
            )
        history.append(nxt)


__all__ = ("StepsConfig", "OrderSteps")
