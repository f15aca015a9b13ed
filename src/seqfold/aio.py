"""
asyncio front-ends for the sequential fold.

reduce_future wraps the continuation protocol in a Future so the result can
be awaited. fold_async takes coroutine steps and awaits them in order.
"""

from __future__ import annotations
from typing import Any, Awaitable, Callable, Sequence, TypeVar
import asyncio
import logging

from .reducer import (
    _MISSING,
    StepFunc,
    _check_callable,
    _check_collection,
    _seed,
    reduce_async,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
A = TypeVar("A")

AsyncStepFunc = Callable[[A, T, int, Sequence[T]], Awaitable[A]]


def reduce_future(
    collection: Sequence[T],
    step: StepFunc,
    initial: Any = _MISSING,
) -> asyncio.Future:
    """
    Run reduce_async and expose the result as a Future on the running loop.

    Argument errors raise immediately, as with reduce_async. If the future
    is cancelled before the fold completes, the result is discarded.

    Example:
        def step(prev, curr, n, arr, next):
            loop.call_later(0.1, next, prev + curr)

        result = await reduce_future(["foo", "bar", "baz"], step)
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future = loop.create_future()

    def on_complete(result: Any) -> None:
        if future.cancelled():
            logger.debug("Fold completed after its future was cancelled")
            return
        future.set_result(result)

    reduce_async(collection, step, on_complete, initial)
    return future


async def fold_async(
    collection: Sequence[T],
    step: AsyncStepFunc,
    initial: Any = _MISSING,
) -> Any:
    """
    Fold with coroutine steps, awaiting each before starting the next.

    Seeding, numbering and hole skipping match reduce_async. Each step is
    called as step(previous, current, n, collection) and its result becomes
    the next accumulator. Exceptions from a step propagate to the awaiter.

    Example:
        async def step(prev, curr, n, arr):
            await asyncio.sleep(0.1)
            return prev + curr

        await fold_async(["foo", "bar", "baz"], step)  # "foobarbaz"
    """
    _check_collection(collection, "fold_async")
    _check_callable(step, "step")
    slots, accumulator, n = _seed(collection, initial, "fold_async")

    for _, current in slots:
        accumulator = await step(accumulator, current, n, collection)
        n += 1
    return accumulator
