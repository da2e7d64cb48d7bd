"""Shared infrastructure for examples."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine

from orderflow import OrderSteps, StepsConfig
from orderflow.logging import configure_logging


def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def quick_steps(**overrides: object) -> OrderSteps:
    """Stub steps with a short latency so demos finish fast."""
    return OrderSteps(StepsConfig(latency=0.2, **overrides))  # type: ignore[arg-type]


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:
    configure_logging()
    asyncio.run(main())
