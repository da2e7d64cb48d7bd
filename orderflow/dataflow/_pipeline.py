"""
BlockPipeline — a linear run of linked blocks.
"""

from __future__ import annotations

import asyncio
from typing import Any

from orderflow.dataflow._blocks import Block


class BlockPipeline:
    """
    Links blocks head to tail with completion propagation.

    wait() awaits every block, so no worker fault goes unobserved, and
    re-raises the tail's fault.
    """

    def __init__(self, *blocks: Block[Any]) -> None:
        if not blocks:
            raise ValueError("BlockPipeline needs at least one block")
        self.blocks = blocks
        for source, target in zip(blocks, blocks[1:]):
            source.link_to(target, propagate_completion=True)

    @property
    def head(self) -> Block[Any]:
        return self.blocks[0]

    @property
    def tail(self) -> Block[Any]:
        return self.blocks[-1]

    def post(self, item: object) -> bool:
        return self.head.post(item)

    def complete(self) -> None:
        self.head.complete()

    async def wait(self) -> None:
        results = await asyncio.gather(
            *(block.completion for block in self.blocks),
            return_exceptions=True,
        )
        last = results[-1]
        if isinstance(last, BaseException):
            raise last


__all__ = ("BlockPipeline",)
