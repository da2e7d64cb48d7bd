"""
Chain — sequential fallible steps.

Level 3: orderflow.chain
Level 2: kungfu.Result
"""

from kungfu import Ok, Error
from orderflow import chain as C
from orderflow._types import as_fault
from examples._infra import banner, run, quick_steps


async def main() -> None:
    banner("Chain: retrieve → discount → update")

    steps = quick_steps(discount_error="Coupon expired")
    flow = C.ChainProcessor(steps).order_chain(123)

    # Execute without mapping to an Outcome to see chain metadata
    result = await C.run(flow)

    match result:
        case Ok(r):
            print(f"\n✓ Success after {r.steps_executed} steps")
        case Error(e):
            print(f"\n✗ Failed at step {e.step_failed} ({e.label}): {e.error}")

    banner("Chain: ad-hoc steps")

    async def parse() -> int:
        return int("42")

    async def halve(x: int) -> float:
        return x / 2

    adhoc = C.from_async(parse, on_error=as_fault).then(
        lambda x: C.from_async(lambda: halve(x), on_error=as_fault)
    )
    print(await C.run(adhoc))


if __name__ == "__main__":
    run(main)
