"""
Sequential fold driven by explicit continuations.

Each step receives a `next` callback and the fold only advances when it is
called, so a step may finish its work on a timer, an I/O callback or any
other later event before the following entry is dispatched.
"""

from __future__ import annotations
from typing import Any, Callable, Generic, Iterator, Sequence, TypeVar
import logging

from .errors import ReduceTypeError
from .holes import present

logger = logging.getLogger(__name__)

T = TypeVar("T")
A = TypeVar("A")

Continuation = Callable[..., None]
StepFunc = Callable[[A, T, int, Sequence[T], Continuation], Any]
CompleteFunc = Callable[[A], Any]

class _Missing:
    """Default for `initial` when the caller supplies none."""

    def __repr__(self) -> str:
        return "<no initial value>"


_MISSING: Any = _Missing()


def _check_collection(collection: Any, caller: str) -> None:
    if not isinstance(collection, Sequence) or isinstance(
        collection, (str, bytes, bytearray)
    ):
        raise ReduceTypeError(
            f"{caller} must be called on an array (ordered sequence)",
            got=type(collection),
        )


def _check_callable(fn: Any, name: str) -> None:
    if not callable(fn):
        raise ReduceTypeError(f"{name} must be a function", got=type(fn))


def _seed(
    collection: Sequence[T], initial: Any, caller: str
) -> tuple[Iterator[tuple[int, T]], Any, int]:
    """
    Pick the starting accumulator and step index.

    Returns the iterator over the remaining present entries along with
    them. Without an initial value the first present entry is consumed as
    the seed and numbering starts at 1.
    """
    slots = present(collection)
    if initial is not _MISSING:
        return slots, initial, 0

    first = next(slots, None)
    if first is None:
        raise ReduceTypeError(f"{caller} of empty array with no initial value")
    return slots, first[1], 1


class _IterationState(Generic[T, A]):
    """
    Cursor, accumulator and step index for one in-flight fold.

    `run` is a trampoline: a continuation called while a step is still being
    dispatched only flags the state, and the loop in the original frame picks
    up the next entry. A continuation called later re-enters `run` itself.
    """

    def __init__(
        self,
        collection: Sequence[T],
        slots: Iterator[tuple[int, T]],
        accumulator: A,
        n: int,
        step: StepFunc,
        on_complete: CompleteFunc,
    ):
        self.collection = collection
        self.slots = slots
        self.accumulator = accumulator
        self.n = n
        self._step = step
        self._on_complete = on_complete
        self._dispatching = False
        self._resumed = False

    def run(self) -> None:
        self._dispatching = True
        try:
            for index, current in self.slots:
                self._resumed = False
                try:
                    self._step(
                        self.accumulator,
                        current,
                        self.n,
                        self.collection,
                        self._continuation(index),
                    )
                except Exception:
                    if self._resumed:
                        # The step already advanced the fold; finish it before
                        # the error reaches the caller.
                        self._dispatching = False
                        self.run()
                    raise
                if not self._resumed:
                    # Suspended until the step calls its continuation.
                    return
            logger.debug("Fold complete at step index %d", self.n)
            self._on_complete(self.accumulator)
        finally:
            self._dispatching = False

    def _continuation(self, index: int) -> Continuation:
        called = False

        def next_(*value: Any) -> None:
            nonlocal called
            if len(value) > 1:
                raise TypeError(
                    f"next() takes at most 1 argument ({len(value)} given)"
                )
            if called:
                logger.warning(
                    "Continuation for slot %d called more than once; ignoring",
                    index,
                )
                return
            called = True
            if value:
                self.accumulator = value[0]
            self.n += 1
            if self._dispatching:
                self._resumed = True
            else:
                self.run()

        return next_


def reduce_async(
    collection: Sequence[T],
    step: StepFunc,
    on_complete: CompleteFunc,
    initial: Any = _MISSING,
) -> None:
    """
    Fold `collection` one present entry at a time.

    Args:
        collection: Ordered sequence, possibly sparse. Slots holding HOLE
                    are skipped and not counted.
        step: Called as step(previous, current, n, collection, next) for each
              present entry. Call next(value) to replace the accumulator or
              next() to keep it; the fold waits until one of them happens.
              A next() called synchronously inside the step returns at
              once, and the following step starts only after this step
              returns. A step that raises after calling next() still lets
              the fold run to completion before the error propagates.
        on_complete: Called once with the final accumulator.
        initial: Starting accumulator. When omitted the first present entry
                 is used and numbering starts at 1 instead of 0.

    Raises:
        ReduceTypeError: On invalid arguments, before any step runs.

    Example:
        def step(prev, curr, n, arr, next):
            loop.call_later(0.25, next, prev + curr)

        reduce_async(["foo", "bar", "baz"], step, print)
        # prints "foobarbaz" roughly half a second later
    """
    _check_collection(collection, "reduce_async")
    _check_callable(step, "step")
    _check_callable(on_complete, "on_complete")
    slots, accumulator, n = _seed(collection, initial, "reduce_async")

    logger.debug(
        "Starting fold over %d slots (%s)",
        len(collection),
        "initial value" if initial is not _MISSING else "seeded from first entry",
    )
    _IterationState(collection, slots, accumulator, n, step, on_complete).run()
