# failchain/core/chain/merge.py
"""
Accumulate failures from independent best-effort steps into one.

Typical use, closing several resources and reporting every failure:

    error = None
    for resource in resources:
        try:
            resource.close()
        except Exception as e:
            error = first_or_suppressed(e, error)
    if error is not None:
        raise error

Suppressed companions are not part of the cause chain. They are kept in
insertion order in a list stored on the primary failure.
"""

from __future__ import annotations

from typing import List, Optional, Tuple, TypeVar

from failchain.core.errors import FailChainError
from .mutation import _force_setattr


E = TypeVar("E", bound=BaseException)

SUPPRESSED_ATTR = "_failchain_suppressed"


def _suppressed_list(exc: BaseException) -> List[BaseException]:
    suppressed = getattr(exc, SUPPRESSED_ATTR, None)
    if not isinstance(suppressed, list):
        suppressed = []
        _force_setattr(exc, SUPPRESSED_ATTR, suppressed)
    return suppressed


def add_suppressed(exc: BaseException, suppressed: BaseException) -> None:
    if suppressed is exc:
        raise FailChainError.precondition("A failure cannot suppress itself")
    _suppressed_list(exc).append(suppressed)


def get_suppressed(exc: Optional[BaseException]) -> Tuple[BaseException, ...]:
    """Return the suppressed companions of ``exc`` in the order they were added."""
    if exc is None:
        return ()
    suppressed = getattr(exc, SUPPRESSED_ATTR, None)
    if not isinstance(suppressed, list):
        return ()
    return tuple(suppressed)


def first_or_suppressed(new_exception: E, previous: Optional[E]) -> E:
    """
    Add ``new_exception`` as suppressed to ``previous``, or return
    ``new_exception`` if there is no previous failure.

    Returns:
        ``new_exception`` if ``previous`` is None or the same object,
        otherwise ``previous`` with ``new_exception`` appended to its
        suppressed companions

    Raises:
        FailChainError: PRECONDITION_FAILED if ``new_exception`` is None
    """
    if new_exception is None:
        raise FailChainError.precondition(
            "new_exception must not be None",
            details={"argument": "new_exception"},
        )

    if previous is None or previous is new_exception:
        return new_exception

    add_suppressed(previous, new_exception)
    return previous
