"""Deferred resolution of catalog reads."""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class DeferredResolver:
    """Resolve read operations after a fixed deferral.

    Every read in the catalog goes through ``resolve`` so call sites keep the
    same await-based contract whether the backing store answers immediately
    or over the network. An operation runs exactly once; its return value
    completes the awaitable and any exception it raises fails it. Nothing is
    retried here.
    """

    delay_seconds: float = 0.0

    async def resolve(self, operation: Callable[[], T]) -> T:
        """Suspend for the configured delay, then run the operation."""
        await asyncio.sleep(self.delay_seconds)
        return operation()

    def submit(self, operation: Callable[[], T]) -> "asyncio.Task[T]":
        """Start resolving the operation as an independent task.

        Must be called from a running event loop.
        """
        return asyncio.get_running_loop().create_task(self.resolve(operation))
