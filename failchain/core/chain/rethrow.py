# failchain/core/chain/rethrow.py
"""
Re-raise helpers for propagation boundaries.

Two groups of failures are never wrapped, since wrapping would hide them from
the handlers that must see them:

- runtime-level failures: fatal kinds and a plain MemoryError, the same rule
  as is_fatal_or_out_of_memory_error (MemoryError subclasses are ordinary
  application errors)
- control-flow signals: GeneratorExit and asyncio.CancelledError, which
  generators and the event loop expect to see unchanged
"""

from __future__ import annotations

from typing import NoReturn, Optional, Tuple, Type
import asyncio

from .classify import is_fatal_error, is_fatal_or_out_of_memory_error


CONTROL_FLOW_SIGNALS: Tuple[Type[BaseException], ...] = (
    GeneratorExit,
    asyncio.CancelledError,
)


def _passes_through(exc: BaseException) -> bool:
    return is_fatal_or_out_of_memory_error(exc) or isinstance(exc, CONTROL_FLOW_SIGNALS)


def _describe(exc: BaseException) -> str:
    try:
        text = str(exc)
    except Exception:
        text = ""
    name = type(exc).__name__
    return f"{name}: {text}" if text else name


def rethrow_exception(exc: BaseException, parent_message: str) -> NoReturn:
    """
    Raise ``exc`` where the caller may only raise Exception.

    Exceptions, runtime-level failures and control-flow signals are raised
    directly. Any other BaseException subclass is wrapped in an Exception
    carrying ``parent_message``, chained to ``exc``.
    """
    if isinstance(exc, Exception) or _passes_through(exc):
        raise exc
    raise Exception(parent_message) from exc


def to_exception(exc: BaseException) -> Exception:
    """Convert ``exc`` to an Exception, wrapping it if necessary."""
    if isinstance(exc, Exception):
        return exc
    wrapper = Exception(_describe(exc))
    wrapper.__cause__ = exc
    return wrapper


def try_rethrow_exception(exc: Optional[BaseException]) -> None:
    """Raise ``exc`` if it is not None."""
    if exc is not None:
        raise exc


def rethrow(exc: BaseException) -> NoReturn:
    """
    Raise ``exc`` where the caller may only raise RuntimeError.

    RuntimeErrors, runtime-level failures and control-flow signals are raised
    directly, anything else is wrapped in a RuntimeError chained to ``exc``.
    """
    if isinstance(exc, RuntimeError) or _passes_through(exc):
        raise exc
    raise RuntimeError(_describe(exc)) from exc


def rethrow_if_fatal_error(exc: BaseException) -> None:
    """Raise ``exc`` if it is fatal to the runtime, see is_fatal_error."""
    if is_fatal_error(exc):
        raise exc


def rethrow_if_fatal_error_or_oom(exc: BaseException) -> None:
    """Raise ``exc`` if it is fatal to the runtime or a plain MemoryError."""
    if is_fatal_or_out_of_memory_error(exc):
        raise exc
