"""
Seqfold: Sequential async fold over ordered, possibly sparse collections.

Each step advances the fold by calling an explicit continuation, so it can
finish its work at any later time (timers, I/O, external events) before the
next entry is dispatched.

Usage:
    from seqfold import reduce_async, reduce_future, fold_async, HOLE

    # Continuation-driven fold
    reduce_async(items, step, on_complete)

    # Same fold, awaited
    result = await reduce_future(items, step)

    # Coroutine steps awaited one after another
    result = await fold_async(items, async_step, initial)
"""

from .reducer import reduce_async, Continuation, StepFunc, CompleteFunc
from .aio import reduce_future, fold_async, AsyncStepFunc
from .holes import HOLE, is_hole, sparse, present
from .errors import ReduceTypeError

__version__ = "0.1.0"
__all__ = [
    # Core primitive
    "reduce_async",
    "Continuation",
    "StepFunc",
    "CompleteFunc",
    # asyncio front-ends
    "reduce_future",
    "fold_async",
    "AsyncStepFunc",
    # Sparse collections
    "HOLE",
    "is_hole",
    "sparse",
    "present",
    # Errors
    "ReduceTypeError",
]
