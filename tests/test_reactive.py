"""Tests for the RxPY bridge and the reactive pipeline."""

import pytest
import rx
from rx import operators as ops

from orderflow import Failure, Success, NOT_FOUND_MESSAGE
from orderflow import reactive as R


@pytest.mark.asyncio
async def test_from_async_is_cold():
    calls: list[int] = []

    async def work() -> int:
        calls.append(1)
        return 42

    source = R.from_async(work)
    assert calls == []

    assert await R.first_value(source) == 42
    assert await R.first_value(source) == 42
    assert len(calls) == 2


@pytest.mark.asyncio
async def test_first_value_raises_error():
    async def broken() -> int:
        raise ValueError("nope")

    with pytest.raises(ValueError, match="nope"):
        await R.first_value(R.from_async(broken))


@pytest.mark.asyncio
async def test_operators_compose_over_coroutines():
    async def one() -> int:
        return 1

    async def add_two(x: int) -> int:
        return x + 2

    source = R.from_async(one).pipe(
        ops.flat_map(lambda x: R.from_async(lambda: add_two(x))),
        ops.map(lambda x: x * 10),
    )

    assert await R.first_value(source) == 30


@pytest.mark.asyncio
async def test_processor_emits_one_outcome_then_completes(steps):
    seen: list[object] = []
    completed: list[bool] = []
    processor = R.ReactiveProcessor(steps)

    await R.first_value(
        processor.complete_order_process(123).pipe(
            ops.do_action(on_next=seen.append, on_completed=lambda: completed.append(True)),
            ops.to_list(),
        )
    )

    assert seen == [Success()]
    assert completed == [True]


@pytest.mark.asyncio
async def test_missing_order_is_caught(make_steps):
    steps = make_steps(missing=True)
    processor = R.ReactiveProcessor(steps)

    outcome = await R.first_value(processor.complete_order_process(5))

    assert outcome == Failure(NOT_FOUND_MESSAGE)
    assert steps.calls["apply_discount"] == 0


@pytest.mark.asyncio
async def test_empty_source_errors():
    with pytest.raises(Exception):
        await R.first_value(rx.empty())
