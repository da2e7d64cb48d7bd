"""
DataflowProcessor — the order pipeline as three linked blocks.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderflow._types import (
    Order,
    Outcome,
    Success,
    Failure,
    OrderNotFound,
    IllegalTransition,
    as_fault,
)
from orderflow.dataflow._blocks import TransformBlock, ActionBlock
from orderflow.dataflow._pipeline import BlockPipeline
from orderflow.logging import get_logger
from orderflow.steps import OrderSteps

logger = get_logger(__name__)


@dataclass(slots=True)
class DataflowProcessor:
    steps: OrderSteps

    async def _retrieve_existing(self, order_id: int) -> Order:
        order = await self.steps.retrieve(order_id)
        if order is None:
            raise OrderNotFound()
        return order

    def build(self) -> BlockPipeline:
        return BlockPipeline(
            TransformBlock(self._retrieve_existing, name="retrieve"),
            TransformBlock(self.steps.apply_discount, name="discount"),
            ActionBlock(self.steps.update, name="update"),
        )

    async def process(self, order_id: int) -> Outcome:
        pipeline = self.build()
        pipeline.post(order_id)
        pipeline.complete()

        outcome: Outcome
        try:
            await pipeline.wait()
        except IllegalTransition:
            raise
        except Exception as exc:
            fault = as_fault(exc)
            logger.debug("Error processing order.", error=fault.message)
            outcome = Failure(fault.message)
        else:
            outcome = Success()

        return self.steps.conclude(order_id, outcome)


__all__ = ("DataflowProcessor",)
