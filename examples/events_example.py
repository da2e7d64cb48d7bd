"""
Events — the order pipeline behind an event aggregator.

Level 3: orderflow.events
"""

from orderflow import events as E
from examples._infra import banner, run, quick_steps


async def announce(event: E.OrderSucceeded) -> None:
    print(f"\n✓ Order {event.order_id} processed successfully.")


async def alert(event: E.OrderFailed) -> None:
    print(f"\n✗ Order {event.order_id} processing failed: {event.error}")


async def audit(event: E.OrderFailed) -> None:
    print(f"  audit: {event.topic} {event.order_id}")


async def main() -> None:
    banner("Events: publish a request, listen for the answer")

    bus = E.EventAggregator()
    bus.subscribe(E.OrderSucceeded, announce)
    bus.subscribe(E.OrderFailed, alert)
    bus.subscribe(E.OrderFailed, audit)

    E.EventProcessor(quick_steps(update_error="Database is read-only"), bus)

    await bus.publish(E.OrderRequested(order_id=123))


if __name__ == "__main__":
    run(main)
