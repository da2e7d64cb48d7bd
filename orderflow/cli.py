"""
Command line demo — run the order pipeline in one or all variants.

    python -m orderflow --variant chain
    python -m orderflow --variant all --latency 0 --discount-error "Coupon expired"
"""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import Sequence

from orderflow._types import Success, Failure, Outcome
from orderflow.config import Settings, get_settings
from orderflow.logging import configure_logging, bind_context, clear_context
from orderflow.steps import OrderSteps, StepsConfig
from orderflow.variants import build, names

BANNER = "Asynchronous Order Processing Demo"


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orderflow",
        description="Retrieve, discount and update an order in five async styles",
    )
    parser.add_argument(
        "--variant", "-v",
        choices=[*names(), "all"],
        default=settings.variant,
        help=f"Pipeline style (default: {settings.variant})",
    )
    parser.add_argument(
        "--order-id",
        type=int,
        default=settings.order_id,
        help=f"Order to process (default: {settings.order_id})",
    )
    parser.add_argument(
        "--latency",
        type=float,
        default=settings.step_latency,
        help=f"Seconds each step sleeps (default: {settings.step_latency})",
    )
    parser.add_argument(
        "--missing",
        action="store_true",
        help="Retrieval finds no order",
    )
    parser.add_argument(
        "--discount-error",
        metavar="MSG",
        help="Discount step fails with MSG",
    )
    parser.add_argument(
        "--update-error",
        metavar="MSG",
        help="Update step fails with MSG",
    )
    return parser


def terminal_line(order_id: int, outcome: Outcome) -> str:
    match outcome:
        case Success():
            return f"Order {order_id} processed successfully."
        case Failure(message):
            return f"Order {order_id} processing failed: {message}"


async def run_variant(variant: str, order_id: int, config: StepsConfig) -> Outcome:
    pipeline = build(variant, OrderSteps(config))
    bind_context(variant=variant, order_id=order_id)
    try:
        outcome = await pipeline.process(order_id)
    finally:
        clear_context()
    print(terminal_line(order_id, outcome))
    return outcome


async def run_cli(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()
    args = build_parser(settings).parse_args(argv)

    config = StepsConfig(
        latency=args.latency,
        missing=args.missing,
        discount_error=args.discount_error,
        update_error=args.update_error,
    )
    variants = names() if args.variant == "all" else (args.variant,)

    print(BANNER)
    failed = 0
    for variant in variants:
        if len(variants) > 1:
            print(f"\n── {variant} ──")
        outcome = await run_variant(variant, args.order_id, config)
        if isinstance(outcome, Failure):
            failed += 1

    return 1 if failed else 0


def main(argv: Sequence[str] | None = None) -> int:
    configure_logging()
    return asyncio.run(run_cli(argv))


__all__ = ("BANNER", "build_parser", "terminal_line", "run_variant", "run_cli", "main")
