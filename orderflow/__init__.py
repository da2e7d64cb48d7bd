"""
orderflow — one order pipeline, five async idioms.

    from orderflow import chain as C       # Result chains
    from orderflow import structured       # async/await
    from orderflow import dataflow as D    # Linked blocks
    from orderflow import reactive as R    # RxPY observables
    from orderflow import events as E      # Event aggregator
"""

from orderflow import chain
from orderflow import dataflow
from orderflow import reactive
from orderflow import events
from orderflow import structured
from orderflow import lift
from orderflow._types import (
    Order,
    Success,
    Failure,
    Outcome,
    Stage,
    StepFault,
    OrderNotFound,
    DiscountFault,
    UpdateFault,
    IllegalTransition,
    OrderPipeline,
    NOT_FOUND_MESSAGE,
)
from orderflow.steps import OrderSteps, StepsConfig
from orderflow.variants import VARIANTS, build

__version__ = "0.1.0"

__all__ = (
    "chain",
    "dataflow",
    "reactive",
    "events",
    "structured",
    "lift",
    "Order",
    "Success",
    "Failure",
    "Outcome",
    "Stage",
    "StepFault",
    "OrderNotFound",
    "DiscountFault",
    "UpdateFault",
    "IllegalTransition",
    "OrderPipeline",
    "NOT_FOUND_MESSAGE",
    "OrderSteps",
    "StepsConfig",
    "VARIANTS",
    "build",
)
