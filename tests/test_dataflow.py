"""Tests for dataflow blocks."""

import asyncio

import pytest

from orderflow import dataflow as D


async def _double(x: int) -> int:
    await asyncio.sleep(0)
    return x * 2


@pytest.mark.asyncio
async def test_transform_keeps_unclaimed_output():
    block = D.TransformBlock(_double, name="double")
    for i in (1, 2, 3):
        assert block.post(i)
    block.complete()

    await block.completion

    assert block.output == [2, 4, 6]


@pytest.mark.asyncio
async def test_post_after_complete_is_declined():
    block = D.TransformBlock(_double)
    block.complete()

    assert not block.post(1)
    await block.completion


@pytest.mark.asyncio
async def test_pipeline_delivers_in_order():
    seen: list[int] = []

    async def collect(x: int) -> None:
        seen.append(x)

    pipeline = D.BlockPipeline(
        D.TransformBlock(_double, name="double"),
        D.TransformBlock(_double, name="again"),
        D.ActionBlock(collect, name="collect"),
    )
    for i in range(5):
        pipeline.post(i)
    pipeline.complete()

    await pipeline.wait()

    assert seen == [0, 4, 8, 12, 16]
    assert all(block.declined for block in pipeline.blocks)


@pytest.mark.asyncio
async def test_fault_propagates_downstream_and_drops_pending():
    seen: list[int] = []

    async def explode(x: int) -> int:
        await asyncio.sleep(0)
        if x == 2:
            raise ValueError("two is not allowed")
        return x

    async def collect(x: int) -> None:
        seen.append(x)

    head = D.TransformBlock(explode, name="explode")
    tail = D.ActionBlock(collect, name="collect")
    pipeline = D.BlockPipeline(head, tail)
    for i in (1, 2, 3):
        pipeline.post(i)
    pipeline.complete()

    with pytest.raises(ValueError, match="two is not allowed"):
        await pipeline.wait()

    assert 3 not in seen
    assert head.completion.exception() is not None
    assert tail.completion.exception() is not None
    assert not head.post(4)


@pytest.mark.asyncio
async def test_explicit_fault():
    block = D.ActionBlock(lambda _: asyncio.sleep(0), name="idle")
    block.fault(RuntimeError("stopped"))

    with pytest.raises(RuntimeError, match="stopped"):
        await block.completion


@pytest.mark.asyncio
async def test_link_without_completion_propagation():
    seen: list[int] = []

    async def collect(x: int) -> None:
        seen.append(x)

    source = D.TransformBlock(_double)
    target = D.ActionBlock(collect)
    source.link_to(target, propagate_completion=False)
    source.post(1)
    source.complete()
    await source.completion

    assert not target.declined
    target.complete()
    await target.completion
    assert seen == [2]


def test_empty_pipeline_rejected():
    with pytest.raises(ValueError):
        D.BlockPipeline()
