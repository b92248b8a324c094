# failchain/core/errors/wrappers.py
"""
Wrapper failures introduced by asynchronous and deferred execution.

Neither type carries meaning of its own: the interesting failure is always
the ``__cause__``. Use ``strip_completion_exception`` and
``strip_execution_exception`` to get back to it.
"""

from __future__ import annotations

from typing import Optional


class CompletionError(RuntimeError):
    """A completion stage (callback, continuation, future) failed."""

    @classmethod
    def wrap(cls, exc: BaseException, message: Optional[str] = None) -> "CompletionError":
        wrapper = cls(message if message is not None else f"{type(exc).__name__}: {exc}")
        wrapper.__cause__ = exc
        return wrapper


class ExecutionError(Exception):
    """Retrieving the result of a computation failed because the computation raised."""

    @classmethod
    def wrap(cls, exc: BaseException, message: Optional[str] = None) -> "ExecutionError":
        wrapper = cls(message if message is not None else f"{type(exc).__name__}: {exc}")
        wrapper.__cause__ = exc
        return wrapper
