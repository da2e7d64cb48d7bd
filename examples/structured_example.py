"""
Structured — three awaits in one try block.

Level 3: orderflow.structured
Level 2: asyncio
"""

import asyncio

from orderflow import Failure, Success
from orderflow.structured import AwaitProcessor
from examples._infra import banner, run, quick_steps


async def main() -> None:
    banner("Structured: happy path")

    steps = quick_steps()
    outcome = await AwaitProcessor(steps).process(123)
    print(f"\n{outcome}  journal={[s.value for s in steps.journal(123)]}")

    banner("Structured: update fails")

    steps = quick_steps(update_error="Database is read-only")
    match await AwaitProcessor(steps).process(123):
        case Success():
            print("\n✓ Updated")
        case Failure(message):
            print(f"\n✗ {message} after {sum(steps.calls.values())} step calls")

    banner("Structured: independent orders at once")

    steps = quick_steps()
    processor = AwaitProcessor(steps)
    outcomes = await asyncio.gather(*(processor.process(i) for i in (1, 2, 3)))
    print(f"\n{outcomes}")


if __name__ == "__main__":
    run(main)
