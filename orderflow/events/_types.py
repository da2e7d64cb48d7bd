"""
Order events — one frozen record per topic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class OrderRequested:
    """Someone asked for an order to be processed."""

    topic: ClassVar[str] = "order.requested"
    order_id: int


@dataclass(frozen=True, slots=True)
class OrderSucceeded:
    topic: ClassVar[str] = "order.succeeded"
    order_id: int


@dataclass(frozen=True, slots=True)
class OrderFailed:
    topic: ClassVar[str] = "order.failed"
    order_id: int
    error: str


__all__ = ("OrderRequested", "OrderSucceeded", "OrderFailed")
