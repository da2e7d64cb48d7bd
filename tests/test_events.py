"""Tests for the event aggregator and the event-driven pipeline."""

import pytest

from orderflow import Success
from orderflow import events as E


@pytest.mark.asyncio
async def test_publish_fans_out_in_subscription_order():
    bus = E.EventAggregator()
    seen: list[str] = []

    async def first(event: E.OrderSucceeded) -> None:
        seen.append(f"first:{event.order_id}")

    async def second(event: E.OrderSucceeded) -> None:
        seen.append(f"second:{event.order_id}")

    bus.subscribe(E.OrderSucceeded, first)
    bus.subscribe(E.OrderSucceeded, second)

    assert await bus.publish(E.OrderSucceeded(order_id=1)) == 2
    assert seen == ["first:1", "second:1"]


@pytest.mark.asyncio
async def test_topics_are_isolated():
    bus = E.EventAggregator()
    seen: list[object] = []

    async def on_failure(event: E.OrderFailed) -> None:
        seen.append(event)

    bus.subscribe(E.OrderFailed, on_failure)

    assert await bus.publish(E.OrderSucceeded(order_id=1)) == 0
    assert seen == []


@pytest.mark.asyncio
async def test_unsubscribe():
    bus = E.EventAggregator()

    async def handler(event: E.OrderRequested) -> None:
        raise AssertionError("should not be called")

    unsubscribe = bus.subscribe(E.OrderRequested, handler)
    assert bus.subscribers(E.OrderRequested) == 1

    unsubscribe()
    unsubscribe()

    assert bus.subscribers(E.OrderRequested) == 0
    assert await bus.publish(E.OrderRequested(order_id=1)) == 0


@pytest.mark.asyncio
async def test_failing_listener_does_not_starve_others():
    bus = E.EventAggregator()
    seen: list[int] = []

    async def broken(event: E.OrderSucceeded) -> None:
        raise RuntimeError("listener down")

    async def healthy(event: E.OrderSucceeded) -> None:
        seen.append(event.order_id)

    bus.subscribe(E.OrderSucceeded, broken)
    bus.subscribe(E.OrderSucceeded, healthy)

    with pytest.raises(ExceptionGroup) as info:
        await bus.publish(E.OrderSucceeded(order_id=3))

    assert seen == [3]
    assert [str(e) for e in info.value.exceptions] == ["listener down"]


@pytest.mark.asyncio
async def test_processor_answers_requests_with_terminal_events(make_steps):
    bus = E.EventAggregator()
    steps = make_steps(discount_error="Coupon expired")
    successes: list[E.OrderSucceeded] = []
    failures: list[E.OrderFailed] = []

    async def on_success(event: E.OrderSucceeded) -> None:
        successes.append(event)

    async def on_failure(event: E.OrderFailed) -> None:
        failures.append(event)

    bus.subscribe(E.OrderSucceeded, on_success)
    bus.subscribe(E.OrderFailed, on_failure)
    E.EventProcessor(steps, bus)

    await bus.publish(E.OrderRequested(order_id=123))

    assert successes == []
    assert failures == [E.OrderFailed(order_id=123, error="Coupon expired")]
    assert steps.calls["update"] == 0


@pytest.mark.asyncio
async def test_process_cleans_up_its_listeners(steps):
    bus = E.EventAggregator()
    processor = E.EventProcessor(steps, bus)

    await processor.process(1)

    assert bus.subscribers(E.OrderRequested) == 1
    assert bus.subscribers(E.OrderSucceeded) == 0
    assert bus.subscribers(E.OrderFailed) == 0


def test_event_topics():
    assert E.OrderRequested.topic == "order.requested"
    assert E.OrderSucceeded.topic == "order.succeeded"
    assert E.OrderFailed.topic == "order.failed"


@pytest.mark.asyncio
async def test_process_keeps_first_answer_on_shared_bus(make_steps):
    bus = E.EventAggregator()
    first = E.EventProcessor(make_steps(), bus)
    E.EventProcessor(make_steps(update_error="Disk full"), bus)

    outcome = await first.process(8)

    assert outcome == Success()


@pytest.mark.asyncio
async def test_process_outcome_survives_broken_listener(steps):
    bus = E.EventAggregator()
    processor = E.EventProcessor(steps, bus)

    async def broken(event: E.OrderSucceeded) -> None:
        raise RuntimeError("audit log down")

    bus.subscribe(E.OrderSucceeded, broken)

    assert await processor.process(2) == Success()
    assert bus.subscribers(E.OrderSucceeded) == 1
