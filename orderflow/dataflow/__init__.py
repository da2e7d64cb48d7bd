"""
Dataflow — staged block pipelines on asyncio queues.

    from orderflow import dataflow as D

    pipeline = D.BlockPipeline(
        D.TransformBlock(fetch, name="fetch"),
        D.ActionBlock(store, name="store"),
    )
    pipeline.post(42)
    pipeline.complete()
    await pipeline.wait()
"""

from orderflow.dataflow._blocks import Block, TransformBlock, ActionBlock
from orderflow.dataflow._pipeline import BlockPipeline
from orderflow.dataflow._processor import DataflowProcessor

__all__ = (
    "Block",
    "TransformBlock",
    "ActionBlock",
    "BlockPipeline",
    "DataflowProcessor",
)
