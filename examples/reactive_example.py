"""
Reactive — the order pipeline as an RxPY observable.

Level 3: orderflow.reactive
"""

import asyncio

from orderflow import reactive as R
from examples._infra import banner, run, quick_steps


async def main() -> None:
    banner("Reactive: subscribe to one Outcome")

    processor = R.ReactiveProcessor(quick_steps(missing=True))
    done = asyncio.Event()

    processor.complete_order_process(123).subscribe(
        on_next=lambda outcome: print(f"\n→ {outcome}"),
        on_error=lambda e: print(f"\n✗ An error occurred: {e}"),
        on_completed=lambda: (print("  Processing complete."), done.set()),
    )
    await done.wait()


if __name__ == "__main__":
    run(main)
