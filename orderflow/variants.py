"""
Variant registry — the five pipelines by name.

    pipeline = build("reactive", OrderSteps(StepsConfig(latency=0)))
    outcome = await pipeline.process(123)
"""

from __future__ import annotations

from collections.abc import Callable

from orderflow._types import OrderPipeline
from orderflow.chain import ChainProcessor
from orderflow.dataflow import DataflowProcessor
from orderflow.events import EventAggregator, EventProcessor
from orderflow.reactive import ReactiveProcessor
from orderflow.steps import OrderSteps
from orderflow.structured import AwaitProcessor

type Factory = Callable[[OrderSteps], OrderPipeline]


class UnknownVariant(KeyError):
    pass


def _events(steps: OrderSteps) -> OrderPipeline:
    return EventProcessor(steps, EventAggregator())


VARIANTS: dict[str, Factory] = {
    "chain": ChainProcessor,
    "structured": AwaitProcessor,
    "dataflow": DataflowProcessor,
    "reactive": ReactiveProcessor,
    "events": _events,
}


def names() -> tuple[str, ...]:
    return tuple(VARIANTS)


def build(name: str, steps: OrderSteps) -> OrderPipeline:
    try:
        factory = VARIANTS[name]
    except KeyError:
        raise UnknownVariant(f"unknown variant {name!r}; expected one of {', '.join(VARIANTS)}") from None
    return factory(steps)


__all__ = ("Factory", "UnknownVariant", "VARIANTS", "names", "build")
