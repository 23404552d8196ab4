from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Sequence

from binding_kernel.bindings.errors import BindingArgumentError
from binding_kernel.bindings.handle import CallableHandle


class SynchronousDelegateInvoker:
    # Calls a handle and, for async implementations, drives the awaitable to completion on this thread.
    def invoke(self, handle: CallableHandle, args: Sequence[object]) -> object:
        result = handle(args)
        if not inspect.isawaitable(result):
            return result
        if _loop_is_running():
            # Blocking inside a running loop would deadlock it; discard the awaitable unstarted.
            if inspect.iscoroutine(result):
                result.close()
            raise BindingArgumentError("async binding cannot be awaited synchronously inside a running event loop")
        # A failing coroutine surfaces as an ExceptionGroup from the task group.
        return asyncio.run(_complete(result))


def _loop_is_running() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


async def _complete(awaitable: Awaitable[object]) -> object:
    async with asyncio.TaskGroup() as group:
        task = group.create_task(_await(awaitable))
    return task.result()


async def _await(awaitable: Awaitable[object]) -> object:
    return await awaitable
