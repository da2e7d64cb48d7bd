"""
Chain — sequential fallible steps over kungfu.Result.

    from orderflow import chain as C

    flow = C.step(find_order).then(lambda order: C.step(discount(order)))
    result = await C.run(flow)
"""

from __future__ import annotations

from orderflow.chain._types import (
    Step,
    Then,
    ChainExpr,
    ChainResult,
    ChainError,
)
from orderflow.chain._step import step, from_async, from_optional
from orderflow.chain._run import run, unwind
from orderflow.chain._processor import ChainProcessor

__all__ = (
    "Step",
    "Then",
    "ChainExpr",
    "ChainResult",
    "ChainError",
    "step",
    "from_async",
    "from_optional",
    "run",
    "unwind",
    "ChainProcessor",
)
