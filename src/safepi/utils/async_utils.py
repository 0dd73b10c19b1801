"""Run the async scan pipeline from synchronous CLI code."""

import asyncio
import threading
from collections.abc import Coroutine
from typing import Any, TypeVar, cast

T = TypeVar("T")


def _run_in_fresh_loop(coro: Coroutine[Any, Any, T]) -> T:
    """Run ``coro`` on a private event loop.

    On the main thread ``asyncio.Runner`` turns Ctrl-C into a cancellation of
    the scan task, cleans up pending tasks and re-raises ``KeyboardInterrupt``.
    """
    with asyncio.Runner() as runner:
        return runner.run(coro)


def safe_async_run(coro: Coroutine[Any, Any, T]) -> T:
    """
    Run ``coro`` to completion and return its result.

    When this thread already runs an event loop (e.g. pytest-asyncio), the
    coroutine is executed on a worker thread with its own loop.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return _run_in_fresh_loop(coro)

    outcome: dict[str, Any] = {}

    def _worker() -> None:
        try:
            outcome["result"] = _run_in_fresh_loop(coro)
        except BaseException as exc:
            outcome["error"] = exc

    worker = threading.Thread(target=_worker, name="safepi-async", daemon=True)
    worker.start()
    worker.join()

    if "error" in outcome:
        raise outcome["error"]
    return cast(T, outcome["result"])
