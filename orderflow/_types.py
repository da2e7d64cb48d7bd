"""
Core types for orderflow.

Re-exports from kungfu + the order pipeline vocabulary.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Protocol

# Re-export from kungfu
from kungfu import Result, Ok, Error, LazyCoroResult

NOT_FOUND_MESSAGE = "Order not found."

# ═══════════════════════════════════════════════════════════════════════════════
# Order
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Order:
    """A customer order, identified by integer id."""

    id: int


# ═══════════════════════════════════════════════════════════════════════════════
# Outcome — Terminal Result of a Run
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Success:
    """All three steps completed."""


@dataclass(frozen=True, slots=True)
class Failure:
    """A step faulted or the order was missing."""

    message: str


type Outcome = Success | Failure

# ═══════════════════════════════════════════════════════════════════════════════
# Faults
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(eq=False)
class StepFault(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class OrderNotFound(StepFault):
    message: str = NOT_FOUND_MESSAGE


@dataclass(eq=False)
class DiscountFault(StepFault):
    pass


@dataclass(eq=False)
class UpdateFault(StepFault):
    pass


class IllegalTransition(RuntimeError):
    """A run's stage journal was advanced out of order."""


def as_fault(exc: Exception) -> StepFault:
    """Normalize any exception into a StepFault, keeping its message."""
    if isinstance(exc, StepFault):
        return exc
    return StepFault(str(exc) or type(exc).__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# Stage — Run State Machine
# ═══════════════════════════════════════════════════════════════════════════════


class Stage(enum.Enum):
    PENDING = "pending"
    RETRIEVING = "retrieving"
    DISCOUNTING = "discounting"
    UPDATING = "updating"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def terminal(self) -> bool:
        return self in (Stage.SUCCEEDED, Stage.FAILED)

    def can_advance_to(self, nxt: Stage) -> bool:
        if self.terminal:
            # A finished run may be followed by a fresh one.
            return nxt is Stage.RETRIEVING
        return nxt in _TRANSITIONS[self]


_TRANSITIONS: dict[Stage, frozenset[Stage]] = {
    Stage.PENDING: frozenset({Stage.RETRIEVING}),
    Stage.RETRIEVING: frozenset({Stage.DISCOUNTING, Stage.FAILED}),
    Stage.DISCOUNTING: frozenset({Stage.UPDATING, Stage.FAILED}),
    Stage.UPDATING: frozenset({Stage.SUCCEEDED, Stage.FAILED}),
}


def terminal_stage(outcome: Outcome) -> Stage:
    return Stage.SUCCEEDED if isinstance(outcome, Success) else Stage.FAILED


# ═══════════════════════════════════════════════════════════════════════════════
# OrderPipeline — What Every Variant Provides
# ═══════════════════════════════════════════════════════════════════════════════


class OrderPipeline(Protocol):
    async def process(self, order_id: int) -> Outcome: ...


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    # Domain
    "Order",
    "Success",
    "Failure",
    "Outcome",
    "NOT_FOUND_MESSAGE",
    # Faults
    "StepFault",
    "OrderNotFound",
    "DiscountFault",
    "UpdateFault",
    "IllegalTransition",
    "as_fault",
    # State machine
    "Stage",
    "terminal_stage",
    # Protocol
    "OrderPipeline",
)
