"""Execution contexts that run request coroutines on the host event loop."""

import asyncio
from collections.abc import Coroutine
from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class ExecutionContext(Protocol):
    """Capability to run a coroutine asynchronously and hand back its future."""

    def start(self, coroutine: Coroutine[Any, Any, T]) -> "asyncio.Future[T]": ...


class AsyncioExecutionContext:
    """Schedule coroutines as tasks on an asyncio event loop.

    Without an explicit loop, tasks go to the loop running at ``start()`` time,
    so ``start()`` must then be called from inside a coroutine or callback.
    Pending tasks are referenced until they finish so they are not
    garbage-collected mid-flight.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop
        self._tasks: set[asyncio.Task[Any]] = set()

    @property
    def pending(self) -> int:
        """Number of tasks started and not yet finished."""
        return len(self._tasks)

    def start(self, coroutine: Coroutine[Any, Any, T]) -> "asyncio.Task[T]":
        try:
            loop = self._loop or asyncio.get_running_loop()
        except RuntimeError:
            coroutine.close()
            raise
        task = loop.create_task(coroutine)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task
