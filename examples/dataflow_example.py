"""
Dataflow — linked blocks with completion and fault propagation.

Level 3: orderflow.dataflow
"""

import asyncio

from orderflow import dataflow as D
from examples._infra import banner, run, quick_steps


async def main() -> None:
    banner("Dataflow: a batch through three blocks")

    async def fetch(n: int) -> int:
        await asyncio.sleep(0.05)
        print(f"  fetched {n}")
        return n

    async def price(n: int) -> float:
        if n == 3:
            raise ValueError(f"no price for {n}")
        return n * 9.99

    async def show(total: float) -> None:
        print(f"  priced {total:.2f}")

    pipeline = D.BlockPipeline(
        D.TransformBlock(fetch, name="fetch"),
        D.TransformBlock(price, name="price"),
        D.ActionBlock(show, name="show"),
    )
    for n in range(1, 5):
        pipeline.post(n)
    pipeline.complete()

    try:
        await pipeline.wait()
    except ValueError as e:
        print(f"\n✗ Pipeline faulted: {e}")

    banner("Dataflow: the order pipeline")
    outcome = await D.DataflowProcessor(quick_steps()).process(123)
    print(f"\n→ {outcome}")


if __name__ == "__main__":
    run(main)
