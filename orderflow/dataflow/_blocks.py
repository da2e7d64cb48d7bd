"""
Dataflow blocks — queue-backed stages with completion and fault propagation.

Each block owns an asyncio.Queue and a single worker task. Messages are
processed one at a time, in order. Linked blocks receive the outputs and,
when linked with propagate_completion, the completion or fault.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

_END = object()


class Block[I]:
    """Base block: input queue, worker task, outgoing links."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._queue: asyncio.Queue[object] = asyncio.Queue()
        self._links: list[tuple[Block[Any], bool]] = []
        self._declined = False
        self._fault: Exception | None = None
        self._task: asyncio.Task[None] | None = None

    def link_to[B: Block[Any]](self, target: B, propagate_completion: bool = True) -> B:
        """Send outputs (and optionally completion) to target. Returns target."""
        self._links.append((target, propagate_completion))
        return target

    def post(self, item: I) -> bool:
        """Queue a message. False once the block stopped accepting input."""
        if self._declined:
            return False
        self._queue.put_nowait(item)
        self._ensure_running()
        return True

    def complete(self) -> None:
        """Stop accepting input; finish once queued messages are processed."""
        if self._declined:
            return
        self._declined = True
        self._queue.put_nowait(_END)
        self._ensure_running()

    def fault(self, exc: Exception) -> None:
        """Stop immediately, dropping queued messages, and fail with exc."""
        if self._task is not None and self._task.done():
            return
        self._declined = True
        if self._fault is None:
            self._fault = exc
        self._queue.put_nowait(_END)
        self._ensure_running()

    @property
    def completion(self) -> asyncio.Task[None]:
        """Task that finishes when the block completes or raises its fault."""
        return self._ensure_running()

    @property
    def declined(self) -> bool:
        return self._declined

    async def _process(self, item: I) -> None:
        raise NotImplementedError

    def _offer(self, value: object) -> bool:
        for target, _ in self._links:
            if target.post(value):
                return True
        return False

    def _ensure_running(self) -> asyncio.Task[None]:
        if self._task is None:
            loop = asyncio.get_running_loop()
            self._task = loop.create_task(self._run(), name=f"block:{self.name}")
        return self._task

    async def _run(self) -> None:
        try:
            while True:
                item = await self._queue.get()
                if self._fault is not None:
                    raise self._fault
                if item is _END:
                    break
                await self._process(item)  # type: ignore[arg-type]
        except Exception as exc:
            self._declined = True
            self._fault = self._fault or exc
            for target, propagate in self._links:
                if propagate:
                    target.fault(exc)
            raise

        for target, propagate in self._links:
            if propagate:
                target.complete()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class TransformBlock[I, O](Block[I]):
    """
    Runs `transform` per message and offers the result downstream.

    Results no linked target accepts are kept in `output`.
    """

    def __init__(
        self,
        transform: Callable[[I], Awaitable[O]],
        *,
        name: str = "transform",
    ) -> None:
        super().__init__(name)
        self._transform = transform
        self.output: list[O] = []

    async def _process(self, item: I) -> None:
        value = await self._transform(item)
        if not self._offer(value):
            self.output.append(value)


class ActionBlock[I](Block[I]):
    """Runs `action` per message. Terminal: produces no output."""

    def __init__(
        self,
        action: Callable[[I], Awaitable[object]],
        *,
        name: str = "action",
    ) -> None:
        super().__init__(name)
        self._action = action

    async def _process(self, item: I) -> None:
        await self._action(item)


__all__ = ("Block", "TransformBlock", "ActionBlock")
