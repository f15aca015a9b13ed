"""Errors raised by seqfold."""

from __future__ import annotations


class ReduceTypeError(TypeError):
    """
    Invalid arguments passed to a fold.

    Raised synchronously, before any step runs. Subclasses TypeError so
    callers can catch either.
    """

    def __init__(self, msg: str, *, got: type | None = None):
        if got is not None:
            msg = f"{msg}, got {got.__name__}"
        super().__init__(msg)
