"""Tests for execution contexts."""

import asyncio

import pytest

from fluentrest._internal.request.context import AsyncioExecutionContext


async def _answer():
    await asyncio.sleep(0)
    return 42


class TestAsyncioExecutionContext:
    """Tests for AsyncioExecutionContext."""

    @pytest.mark.asyncio
    async def test_start_returns_task_with_result(self):
        """Should schedule the coroutine and resolve to its result."""
        context = AsyncioExecutionContext()
        task = context.start(_answer())
        assert isinstance(task, asyncio.Task)
        assert await task == 42

    @pytest.mark.asyncio
    async def test_tracks_pending_tasks(self):
        """Should hold pending tasks until they finish."""
        context = AsyncioExecutionContext()
        task = context.start(_answer())
        assert context.pending == 1
        await task
        await asyncio.sleep(0)
        assert context.pending == 0

    @pytest.mark.asyncio
    async def test_start_does_not_block(self):
        """The coroutine should not run until the caller yields."""
        ran = []

        async def record():
            ran.append(True)

        context = AsyncioExecutionContext()
        task = context.start(record())
        assert ran == []
        await task
        assert ran == [True]

    def test_without_running_loop_raises(self):
        """Should raise when no loop is running and none was given."""
        context = AsyncioExecutionContext()
        with pytest.raises(RuntimeError):
            context.start(_answer())

    def test_explicit_loop(self):
        """Should schedule on an explicitly provided loop."""
        loop = asyncio.new_event_loop()
        try:
            context = AsyncioExecutionContext(loop)
            task = context.start(_answer())
            assert loop.run_until_complete(task) == 42
        finally:
            loop.close()
